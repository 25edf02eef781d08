"""
Authentication Module - Black Box Interface

Purpose: Issue and verify signed session tokens for mock identities
Interface: AuthFactory.build(), AuthenticationService.login(), AuthenticationService.authenticate()
Hidden: JWT claim layout, signing algorithm, identity selection

The module holds no server-side state: a token is valid iff its signature
verifies and it has not expired.
"""

from .errors import AuthError, InvalidTokenError, MissingTokenError
from .factory import AuthFactory
from .identity import IDENTITY_POOL, IdentityPool
from .service import AuthenticationService, AuthResult, LoginResult
from .tokens import TokenService

__all__ = [
    "AuthError",
    "AuthFactory",
    "AuthResult",
    "AuthenticationService",
    "IDENTITY_POOL",
    "IdentityPool",
    "InvalidTokenError",
    "LoginResult",
    "MissingTokenError",
    "TokenService",
]
