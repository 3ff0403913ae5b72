"""
Tests for StripePaymentGateway.

Stripe class methods are patched so no request leaves the process.
"""

from types import SimpleNamespace
from unittest.mock import patch

import pytest
import stripe

from marketplace.boundary.payments import PaymentIntentSummary, StripePaymentGateway


class TestStripePaymentGateway:
    """Test suite for the Stripe adapter."""

    @pytest.mark.asyncio
    async def test_create_payment_intent_returns_client_secret(self) -> None:
        # Arrange
        gateway = StripePaymentGateway(api_key="sk_test_x", currency="usd")
        intent = SimpleNamespace(id="pi_1", client_secret="pi_1_secret_abc")

        # Act
        with patch.object(stripe.PaymentIntent, "create", return_value=intent) as mock_create:
            secret = await gateway.create_payment_intent(4999, metadata={"userId": "U", "courseId": "C"})

        # Assert
        assert secret == "pi_1_secret_abc"
        mock_create.assert_called_once_with(
            api_key="sk_test_x",
            amount=4999,
            currency="usd",
            automatic_payment_methods={"enabled": True, "allow_redirects": "never"},
            metadata={"userId": "U", "courseId": "C"},
        )

    @pytest.mark.asyncio
    async def test_retrieve_payment_intent_summarizes(self) -> None:
        gateway = StripePaymentGateway(api_key="sk_test_x")
        intent = SimpleNamespace(
            id="pi_1", status="succeeded", amount=1000, currency="usd", metadata={"userId": "U"}
        )

        with patch.object(stripe.PaymentIntent, "retrieve", return_value=intent) as mock_retrieve:
            summary = await gateway.retrieve_payment_intent("pi_1")

        mock_retrieve.assert_called_once_with("pi_1", api_key="sk_test_x")
        assert summary.succeeded
        assert summary.amount == 1000
        assert summary.metadata == {"userId": "U"}

    @pytest.mark.asyncio
    async def test_retrieve_unknown_intent_returns_none(self) -> None:
        gateway = StripePaymentGateway(api_key="sk_test_x")
        error = stripe.InvalidRequestError("No such payment_intent: 'tx1'", "intent")

        with patch.object(stripe.PaymentIntent, "retrieve", side_effect=error):
            assert await gateway.retrieve_payment_intent("tx1") is None

    @pytest.mark.asyncio
    async def test_other_stripe_errors_propagate(self) -> None:
        gateway = StripePaymentGateway(api_key="sk_test_x")
        error = stripe.AuthenticationError("Invalid API Key provided")

        with patch.object(stripe.PaymentIntent, "retrieve", side_effect=error):
            with pytest.raises(stripe.AuthenticationError):
                await gateway.retrieve_payment_intent("pi_1")

    def test_summary_not_succeeded(self) -> None:
        summary = PaymentIntentSummary(id="pi_1", status="requires_payment_method", amount=1000, currency="usd")

        assert not summary.succeeded
