"""
Transaction domain models and schemas.

Dependencies: pydantic
System role: Purchase and payment API contracts
"""

from enum import Enum

from pydantic import Field

from marketplace.models.common import CamelModel
from marketplace.models.progress import UserCourseProgress


class PaymentProvider(str, Enum):
    STRIPE = "stripe"


class Transaction(CamelModel):
    """Immutable purchase record stored in the Transactions table."""

    user_id: str
    transaction_id: str
    date_time: str
    course_id: str
    payment_provider: PaymentProvider = PaymentProvider.STRIPE
    amount: int = 0


class CreateTransactionRequest(CamelModel):
    """Purchase fulfillment request sent by the checkout page."""

    user_id: str = Field(..., min_length=1)
    course_id: str = Field(..., min_length=1)
    transaction_id: str = Field(..., min_length=1, description="Stripe PaymentIntent id")
    amount: int = Field(..., ge=0, description="Amount paid in minor units")
    payment_provider: PaymentProvider = PaymentProvider.STRIPE


class PaymentIntentRequest(CamelModel):
    amount: int | None = Field(None, description="Amount in minor units")
    course_id: str | None = Field(None, description="Course being bought; its price overrides amount")


class PaymentIntentResponse(CamelModel):
    client_secret: str


class PurchaseResult(CamelModel):
    """Records written by a successful purchase."""

    transaction: Transaction
    course_progress: UserCourseProgress
