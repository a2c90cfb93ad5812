"""
Pydantic schema definitions for API payloads.

Request bodies are validated here before any repository call.  Room,
booking and user documents are open‑ended (listing and profile fields
are chosen by the frontend), so those schemas declare the fields the
API relies on and allow any others through unchanged.
"""
