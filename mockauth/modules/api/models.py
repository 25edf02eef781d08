"""
Mockauth response models.

These models define the JSON bodies returned by the HTTP API.
"""

from pydantic import BaseModel, Field

REGISTRATION_MESSAGE = "Registration successful"
LOGOUT_MESSAGE = "Logout successful. Please clear the token on client side."


class LoginResponse(BaseModel):
    """Response to a mock login."""

    success: bool = True
    username: str = Field(..., description="Identity drawn from the pool")
    token: str = Field(..., description="Signed bearer token", min_length=1)


class MessageResponse(BaseModel):
    """Fixed acknowledgement body."""

    success: bool = True
    message: str


class Profile(BaseModel):
    """Profile of an authenticated identity."""

    username: str
    email: str
    joined: str
    bio: str
    posts: int
    followers: int
    following: int


class ProfileResponse(BaseModel):
    """Response for the protected profile endpoint."""

    success: bool = True
    profile: Profile


class ErrorResponse(BaseModel):
    """Error body for authentication failures."""

    error: str


class HealthResponse(BaseModel):
    status: str = "ok"
