"""
Authentication dependencies.

Resolves the Clerk user id of the caller from a Bearer header or the
__session cookie set by Clerk's frontend SDK.

Dependencies: fastapi, marketplace.boundary.auth
System role: Request identity resolution
"""

import logging

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from marketplace.api.errors import ApiError
from marketplace.boundary.auth import ClerkTokenVerifier
from marketplace.core.exceptions import ForbiddenError, UnauthorizedError

from .dependencies import get_token_verifier

logger = logging.getLogger(__name__)

SESSION_COOKIE = "__session"

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user_id(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    verifier: ClerkTokenVerifier = Depends(get_token_verifier),
) -> str:
    """
    Authenticated user id.

    Raises:
        ApiError(401): No token or token rejected
    """
    token = credentials.credentials if credentials else request.cookies.get(SESSION_COOKIE)
    if not token:
        raise ApiError(
            status.HTTP_401_UNAUTHORIZED,
            "Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return verifier.verify(token)
    except UnauthorizedError as e:
        raise ApiError(
            status.HTTP_401_UNAUTHORIZED,
            e.message,
            headers={"WWW-Authenticate": "Bearer"},
        ) from e


def require_same_user(user_id: str, current_user_id: str) -> None:
    """
    Raises:
        ForbiddenError: If the path/body user differs from the caller
    """
    if user_id != current_user_id:
        logger.warning(
            "Identity mismatch",
            extra={"requested_user_id": user_id, "current_user_id": current_user_id},
        )
        raise ForbiddenError("Access denied", user_id=current_user_id)
