"""
Stripe payment configuration.

Dependencies: pydantic_settings
System role: Payment provider configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StripeSettings(BaseSettings):
    """Settings for Stripe PaymentIntent creation and verification."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="STRIPE_",
        case_sensitive=False,
        extra="ignore",
    )

    secret_key: str = Field(default="", description="Stripe secret API key")
    currency: str = Field(default="usd", description="Charge currency")
    default_amount: int = Field(
        default=50,
        description="Amount in minor units used when a request omits a positive amount",
    )
    verify_payments: bool = Field(
        default=True,
        description="Require a succeeded PaymentIntent before fulfilling a purchase",
    )
