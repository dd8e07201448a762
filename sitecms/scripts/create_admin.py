"""
Create or reset an admin account.

Usage::

    sitecms-create-admin --username admin --password 'n3w-passw0rd'
"""

import argparse
import asyncio
from typing import Optional, Sequence

from sitecms.core.database import async_session_maker, init_db
from sitecms.core.logging_config import get_logger
from sitecms.server.core.constant import MIN_PASSWORD_LENGTH
from sitecms.server.services.auth import AuthService

logger = get_logger(__name__)


async def create_admin(username: str, password: str) -> None:
    """Upsert ``username`` with ``password`` through the auth service."""
    await init_db()
    async with async_session_maker() as session:
        await AuthService(session).set_password(username, password)
    logger.info(f"Admin account {username!r} is ready")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create or reset a sitecms admin account")
    parser.add_argument("--username", default="admin", help="Admin username (default: admin)")
    parser.add_argument("--password", default="admin123", help="Admin password (default: admin123)")
    args = parser.parse_args(argv)
    if len(args.password) < MIN_PASSWORD_LENGTH:
        parser.error(f"password must be at least {MIN_PASSWORD_LENGTH} characters long")
    return args


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    asyncio.run(create_admin(args.username, args.password))
    if args.password == "admin123":
        logger.warning("The default password is in use; change it after the first login")


if __name__ == "__main__":
    main()
