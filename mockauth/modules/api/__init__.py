"""
API Module - Black Box Interface

Purpose: HTTP response shapes and the documentation page
Interface: Response models, create_docs_router()
Hidden: Documentation file location

The API module only orchestrates - it contains no business logic.
"""

from .docs import create_docs_router
from .models import (
    ErrorResponse,
    HealthResponse,
    LoginResponse,
    MessageResponse,
    Profile,
    ProfileResponse,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "LoginResponse",
    "MessageResponse",
    "Profile",
    "ProfileResponse",
    "create_docs_router",
]
