"""
Common response models and utilities.

Response envelope shared by every endpoint and the camelCase base model.

Dependencies: pydantic
System role: Common API response structures
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base model exchanging camelCase attribute names with clients and storage."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope: human-readable message plus payload."""

    message: str
    data: T | None = None


class ErrorResponse(BaseModel):
    """Error envelope schema."""

    message: str = Field(description="Error message")
    error: Any = Field(default=None, description="Opaque error detail")
