"""
Stripe payment gateway.

Creates PaymentIntents for client-side confirmation and looks them up
again so purchases can be checked against a succeeded charge.

Dependencies: stripe
System role: Payment provider adapter
"""

import asyncio
import logging
from dataclasses import dataclass, field

import stripe

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaymentIntentSummary:
    """Fields of a PaymentIntent the purchase flow relies on."""

    id: str
    status: str
    amount: int
    currency: str
    metadata: dict[str, str] = field(default_factory=dict)

    @property
    def succeeded(self) -> bool:
        return self.status == "succeeded"


class StripePaymentGateway:
    """Thin async wrapper around the Stripe PaymentIntent API."""

    def __init__(self, api_key: str, currency: str = "usd") -> None:
        """
        Initialize gateway.

        Args:
            api_key: Stripe secret key, sent per request
            currency: Currency for every PaymentIntent
        """
        self._api_key = api_key
        self.currency = currency

    async def create_payment_intent(self, amount: int, metadata: dict[str, str] | None = None) -> str:
        """
        Create a PaymentIntent confirmable without redirects.

        Args:
            amount: Amount in minor units
            metadata: Key-value tags stored on the intent (buyer, course)

        Returns:
            str: Client secret for client-side confirmation

        Raises:
            stripe.StripeError: If Stripe rejects the request
        """
        intent = await asyncio.to_thread(
            stripe.PaymentIntent.create,
            api_key=self._api_key,
            amount=amount,
            currency=self.currency,
            automatic_payment_methods={"enabled": True, "allow_redirects": "never"},
            metadata=metadata or {},
        )
        logger.info(
            "Payment intent created",
            extra={"payment_intent_id": intent.id, "amount": amount},
        )
        return intent.client_secret

    async def retrieve_payment_intent(self, payment_intent_id: str) -> PaymentIntentSummary | None:
        """
        Look up a PaymentIntent.

        Args:
            payment_intent_id: Stripe PaymentIntent id (pi_...)

        Returns:
            PaymentIntentSummary | None: None when Stripe does not know the id

        Raises:
            stripe.StripeError: On any other provider failure
        """
        try:
            intent = await asyncio.to_thread(
                stripe.PaymentIntent.retrieve,
                payment_intent_id,
                api_key=self._api_key,
            )
        except stripe.InvalidRequestError as e:
            logger.warning(
                "Unknown payment intent",
                extra={"payment_intent_id": payment_intent_id, "error": str(e)},
            )
            return None

        return PaymentIntentSummary(
            id=intent.id,
            status=intent.status,
            amount=intent.amount,
            currency=intent.currency,
            metadata=dict(intent.metadata or {}),
        )
