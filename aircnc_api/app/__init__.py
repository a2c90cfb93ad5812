"""
Application package initializer.

The API is organised in layers: ``core`` (configuration, logging,
security, database handle, errors), ``repositories`` (one per MongoDB
collection), ``services`` (payment provider and email clients plus the
booking flow) and ``api/v1/endpoints`` (one router per resource).
"""

from .main import app  # noqa: F401
