"""Authentication interfaces following Black Box Design principles."""
from typing import Any, Dict, Optional, Protocol


class TokenIssuer(Protocol):
    """Protocol for token issuance/verification - allows swappable implementations."""

    def issue(self, identity: str) -> str:
        """
        Create a signed token for an identity.

        Args:
            identity: Display name to embed

        Returns:
            Encoded token string
        """
        ...

    def decode(self, token: Optional[str]) -> Dict[str, Any]:
        """
        Verify a token and return all of its claims.

        Raises:
            MissingTokenError: If no token was supplied
            InvalidTokenError: If the signature or expiry check fails
        """
        ...

    def verify(self, token: Optional[str]) -> str:
        """
        Verify a token and return the embedded identity.

        Raises:
            MissingTokenError: If no token was supplied
            InvalidTokenError: If the signature or expiry check fails
        """
        ...


class IdentitySource(Protocol):
    """Protocol for identity selection."""

    def pick_random(self) -> str:
        """Return one identity."""
        ...
