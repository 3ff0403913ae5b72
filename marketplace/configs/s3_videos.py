"""
S3 videos bucket configuration.

Settings for chapter video storage, presigned upload URLs and the
CloudFront domain serving uploaded videos.

Dependencies: pydantic_settings
System role: S3 videos bucket configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class S3VideosSettings(BaseSettings):
    """Settings for S3 video bucket operations."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="S3_VIDEOS_",
        case_sensitive=False,
        extra="ignore",
    )

    bucket: str = Field(
        default="course-marketplace-dev-videos",
        description="S3 bucket for chapter video storage",
    )
    region: str = Field(
        default="us-east-1",
        description="AWS region for S3 bucket",
    )
    cloudfront_domain: str = Field(
        default="",
        description="CDN base URL serving the bucket, e.g. https://d111.cloudfront.net",
    )
    upload_url_expiry: int = Field(
        default=60,
        description="Presigned upload URL expiry in seconds",
    )
