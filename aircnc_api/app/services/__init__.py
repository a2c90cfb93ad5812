"""
Service layer.

Clients for the two external providers (Stripe for payment intents,
SMTP for transactional email) and the booking flow, the one operation
that combines a write with side effects.
"""
