"""
Profile Module - Black Box Interface

Purpose: Build the templated profile returned for an authenticated identity
Interface: build_profile(), derive_email()
Hidden: Fixed profile field values
"""

from .profile import build_profile, derive_email

__all__ = ["build_profile", "derive_email"]
