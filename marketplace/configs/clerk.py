"""
Clerk identity provider configuration.

Dependencies: pydantic_settings
System role: Session token verification settings
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClerkSettings(BaseSettings):
    """Settings for verifying Clerk session tokens."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CLERK_",
        case_sensitive=False,
        extra="ignore",
    )

    jwt_key: str = Field(
        default="",
        description="PEM public key used for networkless session token verification",
    )
    algorithms: list[str] = Field(
        default_factory=lambda: ["RS256"],
        description="Accepted JWT signing algorithms",
    )
    authorized_parties: list[str] = Field(
        default_factory=list,
        description="Allowed values of the azp claim (empty disables the check)",
    )
