"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from marketplace.configs.base import BaseSettings
from marketplace.configs.clerk import ClerkSettings
from marketplace.configs.dynamodb import DynamoDBSettings
from marketplace.configs.s3_videos import S3VideosSettings
from marketplace.configs.stripe_payments import StripeSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    dynamodb: DynamoDBSettings = DynamoDBSettings()
    stripe: StripeSettings = StripeSettings()
    s3_videos: S3VideosSettings = S3VideosSettings()
    clerk: ClerkSettings = ClerkSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from marketplace.configs import get_settings
        settings = get_settings()
    """
    return Settings()
