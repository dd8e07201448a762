"""
Authentication I/O models.
"""

from __future__ import annotations

from pydantic import Field

from .common import CamelModel


class LoginRequest(CamelModel):
    """Credentials posted to /api/auth/login."""

    username: str = Field(min_length=1, description="Admin username")
    password: str = Field(min_length=1, description="Plain-text password")


class LoginData(CamelModel):
    """Successful login payload."""

    token: str = Field(description="Bearer token for admin routes")
    username: str


class ChangePasswordRequest(CamelModel):
    """Body of /api/auth/change-password."""

    old_password: str = Field(min_length=1, description="Current password")
    new_password: str = Field(min_length=1, description="Replacement password (at least 6 characters)")


class TokenPayload(CamelModel):
    """Decoded claims of a valid access token."""

    username: str
    exp: int
    iat: int | None = None
