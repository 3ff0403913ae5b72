"""
DynamoDB configuration settings.

Table names, secondary index names and connection parameters for the
course, transaction and progress collections.

Dependencies: pydantic, pydantic_settings
System role: Key-value store configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DynamoDBSettings(BaseSettings):
    """DynamoDB tables configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DYNAMODB_",
        case_sensitive=False,
        extra="ignore",
    )

    region: str = Field(default="us-east-1", description="AWS region for DynamoDB")
    endpoint_url: str | None = Field(
        default=None,
        description="Override endpoint (e.g. http://localhost:8000 for DynamoDB Local)",
    )

    courses_table: str = Field(default="Courses", description="Course table name")
    transactions_table: str = Field(
        default="Transactions", description="Transaction table name"
    )
    progress_table: str = Field(
        default="UserCourseProgress", description="User course progress table name"
    )
    transactions_user_index: str = Field(
        default="userId-index",
        description="GSI on Transactions partitioned by userId",
    )
