"""
Authentication Service.

Verifies admin credentials, issues and validates bearer tokens, and owns the
single code path that persists passwords.

Passwords are stored as a single unsalted SHA-256 hex digest so that hashes
written by earlier deployments keep working.

When the user table cannot be read the service switches into an explicit
*degraded* state: it is logged and alerted once on entry, reported by the
health endpoint, and login is refused with 503 unless
``AUTH_FALLBACK_ENABLED`` allows the configured bootstrap credentials.
"""

from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from sitecms.core.database.entities.users import User
from sitecms.core.database.repositories.users import UserRepository
from sitecms.core.logging_config import get_logger
from sitecms.core.models.io.auth import TokenPayload
from sitecms.core.monitoring import log_alert
from sitecms.server.core.config import AuthConfig, settings
from sitecms.server.core.constant import MIN_PASSWORD_LENGTH
from sitecms.server.exception_handlers.errors import (
    BadRequestError,
    ServiceUnavailableError,
    UnauthorizedError,
)

logger = get_logger(__name__)


@dataclass
class AuthStatus:
    """Process-wide health of the credential store."""

    degraded: bool = False
    reason: Optional[str] = None
    since: Optional[datetime] = None
    fallback_logins: int = field(default=0)

    def enter_degraded(self, reason: str) -> None:
        if not self.degraded:
            self.degraded = True
            self.since = datetime.now(timezone.utc)
            log_alert("auth.degraded", "Credential store unreachable, auth service degraded", {"reason": reason})
        self.reason = reason

    def recover(self) -> None:
        if self.degraded:
            logger.info(f"Auth service recovered after degraded period starting {self.since}")
        self.degraded = False
        self.reason = None
        self.since = None

    @property
    def state(self) -> str:
        return "degraded" if self.degraded else "ok"


auth_status = AuthStatus()


class AuthService:
    """Credential verification, token issuance and password persistence."""

    def __init__(self, session: AsyncSession, config: Optional[AuthConfig] = None, status: Optional[AuthStatus] = None):
        self.session = session
        self.users = UserRepository(session)
        self.config = config or settings.auth
        self.status = status or auth_status

    @staticmethod
    def hash_password(password: str) -> str:
        """SHA-256 hex digest of the password."""
        return hashlib.sha256(password.encode("utf-8")).hexdigest()

    @classmethod
    def _matches(cls, password: str, stored_hash: str) -> bool:
        return hmac.compare_digest(cls.hash_password(password), stored_hash)

    async def validate_credentials(self, username: str, password: str) -> bool:
        """Check a username/password pair.

        Raises:
            ServiceUnavailableError: The user table is unreachable and no fallback is configured.
        """
        try:
            user = await self.users.get_by_username(username)
        except SQLAlchemyError as e:
            await self.session.rollback()
            self.status.enter_degraded(f"{type(e).__name__}: {e}")
            return self._validate_fallback(username, password)

        self.status.recover()
        return user is not None and self._matches(password, user.password)

    def _validate_fallback(self, username: str, password: str) -> bool:
        if not self.config.fallback_enabled:
            raise ServiceUnavailableError("Authentication service unavailable")
        self.status.fallback_logins += 1
        logger.warning(
            f"Auth degraded: checking bootstrap credentials for {username!r} "
            f"(fallback login #{self.status.fallback_logins})"
        )
        return hmac.compare_digest(username, self.config.admin_username) and hmac.compare_digest(
            password, self.config.admin_password
        )

    def generate_token(self, username: str, now: Optional[datetime] = None) -> str:
        """Issue a signed token for ``username`` valid for the configured lifetime."""
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "username": username,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + timedelta(minutes=self.config.access_token_expire_minutes)).timestamp()),
        }
        return jwt.encode(payload, self.config.secret_key, algorithm=self.config.algorithm)

    def verify_token(self, token: str) -> TokenPayload:
        """Validate signature and expiry.

        Raises:
            UnauthorizedError: The token is malformed, forged or expired.
        """
        try:
            claims = jwt.decode(
                token,
                self.config.secret_key,
                algorithms=[self.config.algorithm],
                options={"require": ["exp", "username"]},
            )
        except jwt.PyJWTError as e:
            logger.debug(f"Token rejected: {e}")
            raise UnauthorizedError("Invalid or expired token") from e
        return TokenPayload.model_validate(claims)

    async def set_password(self, username: str, new_password: str) -> User:
        """Persist a new password for ``username``, creating the user if needed.

        This is the only code path that writes password hashes.
        """
        user = await self.users.get_by_username(username)
        hashed = self.hash_password(new_password)
        if user is None:
            user = await self.users.create(User(username=username, password=hashed))
            logger.info(f"Created user {username!r}")
            return user
        user.password = hashed
        user = await self.users.update(user)
        logger.info(f"Password updated for {username!r}")
        return user

    async def change_password(self, username: str, old_password: str, new_password: str) -> None:
        """Change the password of an authenticated user.

        Raises:
            UnauthorizedError: The old password does not match.
            BadRequestError: The new password is too short.
        """
        if not await self.validate_credentials(username, old_password):
            raise UnauthorizedError("Old password is incorrect")
        if len(new_password) < MIN_PASSWORD_LENGTH:
            raise BadRequestError(f"New password must be at least {MIN_PASSWORD_LENGTH} characters long")
        await self.set_password(username, new_password)

    async def ensure_admin(self) -> bool:
        """Create the configured bootstrap admin if it does not exist yet.

        Returns:
            True if the user was created
        """
        if await self.users.get_by_username(self.config.admin_username) is not None:
            logger.debug(f"Admin user {self.config.admin_username!r} already present")
            return False
        await self.set_password(self.config.admin_username, self.config.admin_password)
        if self.config.admin_password == "admin123":
            logger.warning("Bootstrap admin created with the default password; change it after first login")
        return True
