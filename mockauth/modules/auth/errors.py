"""Authentication errors surfaced to HTTP clients as ``{"error": <message>}``."""


class AuthError(Exception):
    """Base class for authentication failures."""

    status_code = 401
    message = "Authentication failed"

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingTokenError(AuthError):
    """No bearer token was presented."""

    status_code = 401
    message = "Access token required"


class InvalidTokenError(AuthError):
    """Token signature did not verify, token is malformed, or it has expired."""

    status_code = 403
    message = "Invalid or expired token"
