"""
Payment intents via the Stripe REST API.

The server never charges cards itself.  It creates a payment intent
for the requested amount and hands the intent's client secret back to
the browser, which completes the card payment directly with Stripe.
Amounts arrive in major units (``49.99``) and are sent to Stripe as
integer minor units (``4999``).
"""

import logging
import math
import uuid
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional

import httpx

from ..core.config import settings
from ..core.errors import InvalidInputError, PaymentProviderError


logger = logging.getLogger(__name__)


def to_minor_units(amount: Any) -> int:
    """Convert a positive major‑unit amount to integer minor units.

    ``Decimal`` is built from the string form so that ``49.99`` becomes
    exactly ``4999`` rather than ``4998``.

    Raises
    ------
    InvalidInputError
        If ``amount`` is missing, not numeric, not finite, or does not
        amount to at least one minor unit.
    """
    if amount is None or isinstance(amount, bool):
        raise InvalidInputError("price is required")
    if isinstance(amount, float) and not math.isfinite(amount):
        raise InvalidInputError("price must be a finite number")
    try:
        value = Decimal(str(amount))
    except InvalidOperation as e:
        raise InvalidInputError("price must be numeric") from e
    if not value.is_finite():
        raise InvalidInputError("price must be a finite number")
    minor = int((value * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    if minor <= 0:
        raise InvalidInputError("price must be greater than zero")
    return minor


class PaymentService:
    """Creates Stripe payment intents.

    One instance, with one ``httpx.AsyncClient``, is created at startup
    and shared by all requests; ``aclose`` releases the connection pool
    on shutdown.
    """

    def __init__(
        self,
        secret_key: Optional[str] = None,
        api_base: Optional[str] = None,
        currency: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.secret_key = settings.payment_secret_key if secret_key is None else secret_key
        self.api_base = (api_base or settings.payment_api_base).rstrip("/")
        self.currency = currency or settings.payment_currency
        self.http = http_client or httpx.AsyncClient(timeout=30)

    async def create_intent(self, amount: Any, currency: Optional[str] = None) -> str:
        """Create a card payment intent and return its client secret.

        The amount is validated before any network call is made.

        Raises
        ------
        InvalidInputError
            For a missing, zero, negative or non‑numeric amount.
        PaymentProviderError
            If Stripe cannot be reached, rejects the request or answers
            without a client secret.
        """
        minor_amount = to_minor_units(amount)
        if not self.secret_key:
            logger.error("PAYMENT_SECRET_KEY is not configured")
            raise PaymentProviderError()
        headers = {
            "Authorization": f"Bearer {self.secret_key}",
            # Repeated submissions with the same key do not create a second intent
            "Idempotency-Key": uuid.uuid4().hex,
        }
        form = {
            "amount": str(minor_amount),
            "currency": currency or self.currency,
            "payment_method_types[]": "card",
        }
        try:
            response = await self.http.post(f"{self.api_base}/v1/payment_intents", data=form, headers=headers)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error("Stripe rejected payment intent (%s): %s", e.response.status_code, e.response.text)
            raise PaymentProviderError() from e
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Failed to create payment intent: %s", e)
            raise PaymentProviderError() from e

        client_secret = data.get("client_secret") if isinstance(data, dict) else None
        if not client_secret:
            logger.error("Stripe response carried no client_secret")
            raise PaymentProviderError()
        logger.info("Created payment intent %s for %s minor units", data.get("id"), minor_amount)
        return client_secret

    async def aclose(self) -> None:
        await self.http.aclose()
