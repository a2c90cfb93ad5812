"""
Endpoint modules for API v1, one per resource.

Each module defines an ``APIRouter``; ``router.py`` aggregates them.
"""
