"""
Exception hierarchy for the course marketplace.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class MarketplaceException(Exception):
    """Base exception for all marketplace application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class BadRequestError(MarketplaceException):
    """Raised when a request is missing required fields or carries invalid values."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize bad request error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class PaymentVerificationError(BadRequestError):
    """Raised when a purchase is not backed by a succeeded payment."""

    def __init__(
        self,
        message: str,
        transaction_id: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        details["transaction_id"] = transaction_id
        super().__init__(message, details=details)


class NotFoundError(MarketplaceException):
    """Raised when a course or progress record does not exist."""

    def __init__(
        self,
        message: str,
        resource: str | None = None,
        resource_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize not found error.

        Args:
            message: Error message
            resource: Kind of record that is missing (course, progress)
            resource_id: Identifier that was looked up
            details: Additional context
        """
        details = details or {}
        if resource:
            details["resource"] = resource
        if resource_id:
            details["resource_id"] = resource_id
        super().__init__(message, details)


class ForbiddenError(MarketplaceException):
    """Raised on ownership or identity mismatch."""

    def __init__(
        self,
        message: str,
        user_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if user_id:
            details["user_id"] = user_id
        super().__init__(message, details)


class UnauthorizedError(MarketplaceException):
    """Raised when a request carries no valid session token."""

    pass
