"""
Clerk session token verification.

Verifies Clerk session JWTs offline against the instance's PEM public key
and yields the authenticated user id (the sub claim).

Dependencies: python-jose
System role: Authentication adapter
"""

import logging

from jose import JWTError, jwt

from marketplace.core.exceptions import UnauthorizedError

logger = logging.getLogger(__name__)


class ClerkTokenVerifier:
    """Networkless verifier for Clerk session tokens."""

    def __init__(
        self,
        jwt_key: str,
        algorithms: list[str] | None = None,
        authorized_parties: list[str] | None = None,
    ) -> None:
        """
        Args:
            jwt_key: PEM public key (or shared secret for HS* algorithms)
            algorithms: Accepted signing algorithms
            authorized_parties: Allowed azp claim values; empty skips the check
        """
        self._jwt_key = jwt_key
        self._algorithms = algorithms or ["RS256"]
        self._authorized_parties = authorized_parties or []

    def verify(self, token: str) -> str:
        """
        Verify a session token and return its user id.

        Args:
            token: Encoded JWT

        Returns:
            str: Clerk user id

        Raises:
            UnauthorizedError: Token missing, malformed, expired or from an
                unexpected party
        """
        if not self._jwt_key:
            raise UnauthorizedError("Authentication is not configured")

        try:
            claims = jwt.decode(
                token,
                self._jwt_key,
                algorithms=self._algorithms,
                options={"verify_aud": False},
            )
        except JWTError as e:
            logger.warning("Session token rejected", extra={"error": str(e)})
            raise UnauthorizedError("Invalid session token") from e

        azp = claims.get("azp")
        if self._authorized_parties and azp not in self._authorized_parties:
            logger.warning("Session token from unauthorized party", extra={"azp": azp})
            raise UnauthorizedError("Invalid session token")

        user_id = claims.get("sub")
        if not user_id:
            raise UnauthorizedError("Session token has no subject")
        return user_id
