"""
JWT token service.

Tokens are HS256-signed JWTs carrying ``username``, ``iat`` and ``exp``.
The signing key comes from the injected TokenConfig and is never read from
module state, so separate services can use separate keys.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Optional

import jwt

from ...config.provider import TokenConfig
from .errors import InvalidTokenError, MissingTokenError

logger = logging.getLogger(__name__)

IDENTITY_CLAIM = "username"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenService:
    """
    Issues and verifies signed, time-bounded tokens.

    This class is a black box that:
    - Signs identity claims with a symmetric key
    - Verifies signatures against the same key
    - Rejects tokens at or past their expiry
    """

    def __init__(
        self,
        config: TokenConfig,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize token service with injected config.

        Args:
            config: Token signing configuration
            clock: Returns the current aware datetime (defaults to UTC now)
        """
        self.config = config
        self._clock = clock or _utcnow

    @property
    def ttl(self) -> timedelta:
        return timedelta(seconds=self.config.ttl_seconds)

    def issue(self, identity: str) -> str:
        """
        Create a token for the identity, valid for the configured ttl.

        Args:
            identity: Display name to embed in the token

        Returns:
            Encoded JWT string
        """
        now = self._clock()
        claims = {
            IDENTITY_CLAIM: identity,
            "iat": int(now.timestamp()),
            "exp": int((now + self.ttl).timestamp()),
        }
        return jwt.encode(claims, self.config.secret_key, algorithm=self.config.algorithm)

    def decode(self, token: Optional[str]) -> Dict[str, Any]:
        """
        Verify a token and return all of its claims.

        Raises:
            MissingTokenError: If no token was supplied
            InvalidTokenError: If the token is malformed, tampered with, or expired
        """
        if not token:
            raise MissingTokenError()

        try:
            # Expiry is checked below against the injected clock
            claims = jwt.decode(
                token,
                self.config.secret_key,
                algorithms=[self.config.algorithm],
                options={
                    "verify_signature": True,
                    "verify_exp": False,
                    "verify_iat": False,
                    "require": ["exp", IDENTITY_CLAIM],
                },
            )
        except jwt.InvalidTokenError as e:
            logger.debug(f"Rejected token: {e}")
            raise InvalidTokenError() from e

        exp = claims["exp"]
        if not isinstance(exp, (int, float)) or isinstance(exp, bool):
            logger.debug("Rejected token: non-numeric exp claim")
            raise InvalidTokenError()
        if self._clock().timestamp() >= exp:
            logger.debug("Rejected token: expired")
            raise InvalidTokenError()
        if not isinstance(claims[IDENTITY_CLAIM], str):
            logger.debug("Rejected token: non-string identity claim")
            raise InvalidTokenError()

        return claims

    def verify(self, token: Optional[str]) -> str:
        """
        Verify a token and return the embedded identity.

        Raises:
            MissingTokenError: If no token was supplied
            InvalidTokenError: If the signature or expiry check fails
        """
        return self.decode(token)[IDENTITY_CLAIM]
