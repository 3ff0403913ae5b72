"""API-specific dependencies."""

# Re-export common dependencies
from .auth import get_current_user_id, require_same_user
from .dependencies import (
    get_course_repository,
    get_course_service,
    get_payment_gateway,
    get_progress_repository,
    get_progress_service,
    get_s3_video_client,
    get_service_cache,
    get_settings_dependency,
    get_token_verifier,
    get_transaction_repository,
    get_transaction_service,
)

__all__ = [
    "get_current_user_id",
    "require_same_user",
    "get_course_repository",
    "get_course_service",
    "get_payment_gateway",
    "get_progress_repository",
    "get_progress_service",
    "get_s3_video_client",
    "get_service_cache",
    "get_settings_dependency",
    "get_token_verifier",
    "get_transaction_repository",
    "get_transaction_service",
]
