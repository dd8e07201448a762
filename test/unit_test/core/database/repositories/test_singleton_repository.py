"""Unit tests for SingletonRepository."""

from unittest.mock import patch

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from sitecms.core.database import create_sessionmaker
from sitecms.core.database.entities.site_settings import SiteInfo, SiteMeta
from sitecms.core.database.repositories.singleton import SINGLETON_ID, SingletonRepository

pytestmark = pytest.mark.asyncio


class TestSingletonRepository:
    async def test_created_with_defaults(self, in_memory_session: AsyncSession):
        repo = SingletonRepository(in_memory_session, SiteMeta, {"title": "Acme"})

        meta = await repo.get_or_create()

        assert meta.id == SINGLETON_ID
        assert meta.title == "Acme"

    async def test_get_or_create_is_stable(self, in_memory_session: AsyncSession):
        repo = SingletonRepository(in_memory_session, SiteMeta, {"title": "Acme"})
        first = await repo.get_or_create()
        second = await repo.get_or_create()
        assert first.id == second.id == SINGLETON_ID

    async def test_update_ignores_unknown_and_id(self, in_memory_session: AsyncSession):
        repo = SingletonRepository(in_memory_session, SiteInfo, {"theme": "light", "language": "zh-CN"})

        info = await repo.update({"theme": "dark", "id": "other", "not_a_column": 1})

        assert info.id == SINGLETON_ID
        assert info.theme == "dark"
        assert info.language == "zh-CN"

    async def test_last_write_wins(self, in_memory_engine):
        factory = create_sessionmaker(in_memory_engine)
        async with factory() as first, factory() as second:
            await SingletonRepository(first, SiteMeta, {}).update({"title": "one"})
            await SingletonRepository(second, SiteMeta, {}).update({"title": "two"})

        async with factory() as reader:
            meta = await SingletonRepository(reader, SiteMeta, {}).get_or_create()
        assert meta.title == "two"

    async def test_concurrent_first_read(self, in_memory_engine):
        factory = create_sessionmaker(in_memory_engine)
        async with factory() as first, factory() as second:
            await SingletonRepository(first, SiteMeta, {"title": "winner"}).get_or_create()

            original_get = second.get
            calls = []

            async def racing_get(*args, **kwargs):
                # The first lookup misses, as if the other insert had not committed yet
                calls.append(args)
                if len(calls) == 1:
                    return None
                return await original_get(*args, **kwargs)

            with patch.object(second, "get", side_effect=racing_get):
                meta = await SingletonRepository(second, SiteMeta, {"title": "loser"}).get_or_create()

        assert meta.title == "winner"
        assert len(calls) == 2
