"""
API package containing versioned routes.

A version subpackage exposes a top‑level ``router`` which includes all
of its resource endpoints.  ``deps`` holds the dependencies that hand
shared clients (database, payment, email) to the handlers.
"""
