"""
Version 1 of the API.

Paths match the ones the existing web client calls (``/rooms``,
``/bookings``, ``/jwt`` ...), so the router is mounted at the root by
default.
"""
