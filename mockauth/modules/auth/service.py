"""
Authentication Service Facade following Black Box Design principles.

This module provides:
- A clean interface for login and bearer authentication
- Standardized results for the API layer
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .interfaces import IdentitySource, TokenIssuer
from .tokens import IDENTITY_CLAIM

logger = logging.getLogger(__name__)


@dataclass
class LoginResult:
    """Outcome of a mock login."""
    identity: str
    token: str


@dataclass
class AuthResult:
    """Identity attached to an authenticated request."""
    identity: str
    claims: Dict[str, Any] = field(default_factory=dict)


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """
    Return the token part of an Authorization header.

    The token is the second space-separated field, so ``"Bearer"`` on its own
    yields no token. The scheme itself is not checked.
    """
    if not authorization:
        return None
    parts = authorization.split(" ")
    if len(parts) < 2:
        return None
    return parts[1] or None


class AuthenticationService:
    """
    Default authentication facade.

    Hides the token and identity implementations behind a small, stable
    interface for the API layer.
    """

    def __init__(self, token_service: TokenIssuer, identity_pool: IdentitySource):
        """
        Initialize with injected dependencies.

        Args:
            token_service: Issues and verifies tokens
            identity_pool: Supplies identities for new logins
        """
        self.tokens = token_service
        self.identities = identity_pool

    def login(self) -> LoginResult:
        """Pick a random identity and issue a token for it."""
        identity = self.identities.pick_random()
        token = self.tokens.issue(identity)
        logger.info(f"Issued token for {identity}")
        return LoginResult(identity=identity, token=token)

    def authenticate(self, authorization: Optional[str]) -> AuthResult:
        """
        Authenticate a request from its Authorization header.

        Raises:
            MissingTokenError: If the header carries no token
            InvalidTokenError: If the token does not verify
        """
        token = extract_bearer_token(authorization)
        claims = self.tokens.decode(token)
        return AuthResult(identity=claims[IDENTITY_CLAIM], claims=claims)
