from typing import AsyncGenerator

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlmodel.pool import StaticPool

from sitecms.core.database import create_all, create_sessionmaker


@pytest_asyncio.fixture
async def script_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def script_session(script_engine) -> AsyncGenerator[AsyncSession, None]:
    async with create_sessionmaker(script_engine)() as session:
        yield session
