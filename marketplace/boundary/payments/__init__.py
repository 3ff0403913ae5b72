"""
Payment provider boundary.

Exports: StripePaymentGateway, PaymentIntentSummary
"""

from .stripe_gateway import PaymentIntentSummary, StripePaymentGateway

__all__ = ["PaymentIntentSummary", "StripePaymentGateway"]
