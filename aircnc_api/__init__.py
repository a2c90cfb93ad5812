"""
Top‑level package for the AirCNC API.

Makes ``aircnc_api`` importable so that modules within ``app`` can be
referenced by fully qualified names such as ``aircnc_api.app.main``.
All functionality lives in submodules under ``app``.
"""

__all__ = []
