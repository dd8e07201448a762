"""
User entity.

Admin accounts for the dashboard. Passwords are stored as SHA-256 hex digests
produced by ``AuthService.hash_password``.
"""

from __future__ import annotations

from sqlmodel import Field

from ..base import TimestampedEntity


class User(TimestampedEntity, table=True):
    """Admin user account.

    Table: users
    """

    __tablename__ = "users"
    __table_args__ = ({"extend_existing": True},)

    username: str = Field(unique=True, index=True, max_length=128, description="Login name")
    password: str = Field(max_length=64, description="SHA-256 hex digest of the password")

    def __repr__(self) -> str:
        return f"User(username={self.username})"
