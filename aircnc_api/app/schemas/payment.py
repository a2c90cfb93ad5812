"""
Pydantic models for payment intents.

The client posts the total price in major currency units; the server
creates a payment intent for it and returns the client secret used by
the browser to confirm the card payment.
"""

from typing import Optional

from pydantic import BaseModel, Field

from .common import Price


class PaymentIntentCreate(BaseModel):
    # Left optional so that a missing price reaches the payment client,
    # which rejects missing, zero and negative amounts in one place.
    price: Optional[Price] = Field(None, examples=[49.99])


class PaymentIntentRead(BaseModel):
    clientSecret: str
