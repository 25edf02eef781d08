"""Templated profile data for mock identities."""

from typing import Any, Dict

EMAIL_DOMAIN = "example.com"

PROFILE_DEFAULTS: Dict[str, Any] = {
    "joined": "2024-01-15",
    "bio": "This is a dummy profile for testing purposes",
    "posts": 42,
    "followers": 128,
    "following": 95,
}


def derive_email(identity: str) -> str:
    """
    Derive a mock email address from a display name.

    Only the first space becomes a dot; later spaces are kept as-is.

    Example:
        >>> derive_email("Alice Johnson")
        'alice.johnson@example.com'
    """
    local_part = identity.lower().replace(" ", ".", 1)
    return f"{local_part}@{EMAIL_DOMAIN}"


def build_profile(identity: str) -> Dict[str, Any]:
    """Return the profile body for an identity."""
    return {
        "username": identity,
        "email": derive_email(identity),
        **PROFILE_DEFAULTS,
    }
