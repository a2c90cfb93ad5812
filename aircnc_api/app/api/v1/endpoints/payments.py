"""
Payment endpoint for API v1.

Creates a Stripe payment intent for the booking total so that the
browser can confirm the card payment.  The booking itself is saved
separately once the payment has succeeded.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from aircnc_api.app.api.deps import get_payment_service
from aircnc_api.app.core.security import get_current_user
from aircnc_api.app.schemas.payment import PaymentIntentCreate, PaymentIntentRead
from aircnc_api.app.services.payment_service import PaymentService


router = APIRouter()


@router.post("/create-payment-intent", response_model=PaymentIntentRead)
async def create_payment_intent(
    body: PaymentIntentCreate,
    current_user: Dict[str, Any] = Depends(get_current_user),
    payments: PaymentService = Depends(get_payment_service),
) -> PaymentIntentRead:
    """Return the client secret of a new card payment intent for ``price``.

    A missing, zero or negative price is rejected with 400 and Stripe
    is not contacted.
    """
    client_secret = await payments.create_intent(body.price)
    return PaymentIntentRead(clientSecret=client_secret)
