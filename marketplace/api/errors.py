"""
API error handling utilities.

Maps domain exceptions to HTTP responses and renders every error in the
{"message": ..., "error": ...} envelope.

Dependencies: fastapi, marketplace.core.exceptions
System role: HTTP error translation
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from marketplace.core.exceptions import (
    BadRequestError,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


class ApiError(HTTPException):
    """HTTPException carrying an opaque error payload for the envelope."""

    def __init__(
        self,
        status_code: int,
        message: str,
        error: Any = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        super().__init__(status_code=status_code, detail=message, headers=headers)
        self.error = error


def handle_api_errors(failure_message: str) -> Callable[[F], F]:
    """
    Decorator to handle domain errors and transform them into ApiErrors.

    This centralizes:
    - Logging of errors with context
    - Mapping domain exceptions to HTTP status codes
    - A generic 500 carrying failure_message for anything else, including
      stored items that fail to parse

    Args:
        failure_message: Message returned when an unexpected error occurs
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)

            except HTTPException:
                raise

            except BadRequestError as e:
                logger.warning("Bad request", extra={"error": str(e)})
                raise ApiError(status.HTTP_400_BAD_REQUEST, e.message, e.details or None)

            except UnauthorizedError as e:
                logger.warning("Unauthorized request", extra={"error": str(e)})
                raise ApiError(
                    status.HTTP_401_UNAUTHORIZED,
                    e.message,
                    headers={"WWW-Authenticate": "Bearer"},
                )

            except ForbiddenError as e:
                logger.warning("Forbidden request", extra={"error": str(e)})
                raise ApiError(status.HTTP_403_FORBIDDEN, e.message)

            except NotFoundError as e:
                logger.warning("Resource not found", extra={"error": str(e)})
                raise ApiError(status.HTTP_404_NOT_FOUND, e.message)

            except Exception as e:
                logger.exception(failure_message, extra={"error": str(e)})
                raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, failure_message, str(e))

        return wrapper  # type: ignore

    return decorator


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTPExceptions in the response envelope."""
    content: dict[str, Any] = {"message": str(exc.detail)}
    error = getattr(exc, "error", None)
    if error is not None:
        content["error"] = jsonable_encoder(error)
    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Schema violations in path, query or body are bad requests."""
    logger.warning(
        "Request validation failed",
        extra={"path": request.url.path, "error_count": len(exc.errors())},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request", "error": jsonable_encoder(exc.errors())},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
