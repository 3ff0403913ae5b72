"""
Dependency injection container.

Factory functions for FastAPI dependencies. External clients are built
once by the ServiceCache and handed to repositories and services per
request, so tests can override any of them.

Dependencies: marketplace.configs, marketplace.application, marketplace.boundary
System role: DI container for service injection
"""

from functools import lru_cache
from typing import Any

from fastapi import Depends

from marketplace.configs import Settings, get_settings
from marketplace.application.services import (
    CourseService,
    ProgressService,
    TransactionService,
)
from marketplace.boundary.auth import ClerkTokenVerifier
from marketplace.boundary.aws import S3VideoClient
from marketplace.boundary.db import (
    CourseRepository,
    ProgressRepository,
    TransactionRepository,
    create_dynamodb_resource,
)
from marketplace.boundary.payments import StripePaymentGateway


class ServiceCache:
    """Container for cached client instances."""

    def __init__(self) -> None:
        self._dynamodb = None
        self._s3_video_client = None
        self._payment_gateway = None
        self._token_verifier = None

    @property
    def dynamodb(self) -> Any:
        """Get cached DynamoDB service resource."""
        if self._dynamodb is None:
            self._dynamodb = create_dynamodb_resource(get_settings().dynamodb)
        return self._dynamodb

    @property
    def s3_video_client(self) -> S3VideoClient:
        """Get cached S3 video client."""
        if self._s3_video_client is None:
            settings = get_settings()
            self._s3_video_client = S3VideoClient(
                bucket=settings.s3_videos.bucket,
                region=settings.s3_videos.region,
            )
        return self._s3_video_client

    @property
    def payment_gateway(self) -> StripePaymentGateway:
        """Get cached Stripe gateway."""
        if self._payment_gateway is None:
            settings = get_settings()
            self._payment_gateway = StripePaymentGateway(
                api_key=settings.stripe.secret_key,
                currency=settings.stripe.currency,
            )
        return self._payment_gateway

    @property
    def token_verifier(self) -> ClerkTokenVerifier:
        """Get cached Clerk token verifier."""
        if self._token_verifier is None:
            settings = get_settings()
            self._token_verifier = ClerkTokenVerifier(
                jwt_key=settings.clerk.jwt_key,
                algorithms=settings.clerk.algorithms,
                authorized_parties=settings.clerk.authorized_parties,
            )
        return self._token_verifier

    def clear(self) -> None:
        """Clear all cached instances."""
        self._dynamodb = None
        self._s3_video_client = None
        self._payment_gateway = None
        self._token_verifier = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_s3_video_client(cache: ServiceCache = Depends(get_service_cache)) -> S3VideoClient:
    return cache.s3_video_client


def get_payment_gateway(cache: ServiceCache = Depends(get_service_cache)) -> StripePaymentGateway:
    return cache.payment_gateway


def get_token_verifier(cache: ServiceCache = Depends(get_service_cache)) -> ClerkTokenVerifier:
    return cache.token_verifier


def get_course_repository(
    cache: ServiceCache = Depends(get_service_cache),
    settings: Settings = Depends(get_settings_dependency),
) -> CourseRepository:
    return CourseRepository(cache.dynamodb, settings.dynamodb.courses_table)


def get_transaction_repository(
    cache: ServiceCache = Depends(get_service_cache),
    settings: Settings = Depends(get_settings_dependency),
) -> TransactionRepository:
    return TransactionRepository(
        cache.dynamodb,
        settings.dynamodb.transactions_table,
        user_index=settings.dynamodb.transactions_user_index,
    )


def get_progress_repository(
    cache: ServiceCache = Depends(get_service_cache),
    settings: Settings = Depends(get_settings_dependency),
) -> ProgressRepository:
    return ProgressRepository(cache.dynamodb, settings.dynamodb.progress_table)


def get_course_service(
    courses: CourseRepository = Depends(get_course_repository),
) -> CourseService:
    """
    Get course service instance.

    Args:
        courses: Courses repository (injected via Depends)

    Returns:
        CourseService: Course service instance
    """
    return CourseService(courses=courses)


def get_transaction_service(
    courses: CourseRepository = Depends(get_course_repository),
    transactions: TransactionRepository = Depends(get_transaction_repository),
    progress: ProgressRepository = Depends(get_progress_repository),
    payments: StripePaymentGateway = Depends(get_payment_gateway),
    settings: Settings = Depends(get_settings_dependency),
) -> TransactionService:
    """
    Get transaction service instance.

    Returns:
        TransactionService: Service wired to all three tables and Stripe
    """
    return TransactionService(
        courses=courses,
        transactions=transactions,
        progress=progress,
        payments=payments,
        verify_payments=settings.stripe.verify_payments,
        default_amount=settings.stripe.default_amount,
        currency=settings.stripe.currency,
    )


def get_progress_service(
    progress: ProgressRepository = Depends(get_progress_repository),
    courses: CourseRepository = Depends(get_course_repository),
) -> ProgressService:
    """
    Get progress service instance.

    Returns:
        ProgressService: Progress service instance
    """
    return ProgressService(progress=progress, courses=courses)
