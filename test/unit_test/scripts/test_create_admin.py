"""Unit tests for the create-admin script."""

from unittest.mock import AsyncMock, patch

import pytest

from sitecms.core.database import create_sessionmaker
from sitecms.core.database.repositories.users import UserRepository
from sitecms.scripts.create_admin import create_admin, parse_args
from sitecms.server.services.auth import AuthService


class TestParseArgs:
    def test_defaults(self):
        args = parse_args([])
        assert args.username == "admin"
        assert args.password == "admin123"

    def test_custom(self):
        args = parse_args(["--username", "editor", "--password", "long-enough"])
        assert (args.username, args.password) == ("editor", "long-enough")

    def test_short_password_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["--password", "12345"])


@pytest.mark.asyncio
class TestCreateAdmin:
    async def test_creates_then_resets(self, script_engine):
        factory = create_sessionmaker(script_engine)
        with patch("sitecms.scripts.create_admin.init_db", new=AsyncMock()), patch(
            "sitecms.scripts.create_admin.async_session_maker", factory
        ):
            await create_admin("editor", "first-pass")
            await create_admin("editor", "second-pass")

        async with factory() as session:
            users = UserRepository(session)
            assert await users.count() == 1
            editor = await users.get_by_username("editor")
        assert editor.password == AuthService.hash_password("second-pass")
