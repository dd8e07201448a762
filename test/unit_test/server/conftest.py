import os
from pathlib import Path
from typing import AsyncGenerator, Dict
from unittest.mock import patch

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlmodel.pool import StaticPool

# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Set test database URL before importing app
os.environ["DATABASE_URL"] = TEST_DATABASE_URL

from sitecms.core.database import create_all, create_sessionmaker, get_session  # noqa: E402
from sitecms.server.services.auth import AuthService, auth_status  # noqa: E402
from sitecms.server.services.uploads import UploadManager, get_upload_manager  # noqa: E402


@pytest_asyncio.fixture
async def test_engine():
    """Create a fresh in-memory database for each test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture(name="session")
async def session_fixture(test_engine) -> AsyncGenerator[AsyncSession, None]:
    async with create_sessionmaker(test_engine)() as session:
        yield session


@pytest.fixture
def uploads(tmp_path: Path) -> UploadManager:
    """Upload manager rooted in the test's temporary directory."""
    manager = UploadManager(tmp_path / "uploads")
    manager.ensure_upload_dirs()
    return manager


@pytest.fixture(autouse=True)
def _reset_auth_status():
    auth_status.recover()
    auth_status.fallback_logins = 0
    yield
    auth_status.recover()
    auth_status.fallback_logins = 0


@pytest_asyncio.fixture(name="client")
async def client_fixture(session: AsyncSession, uploads: UploadManager) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client with mocked lifespan and overridden dependencies."""
    from sitecms.server.main import app

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        yield session

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_upload_manager] = lambda: uploads

    # Mock the lifespan to prevent database initialization during tests
    async def mock_lifespan(app):
        yield

    with patch("sitecms.server.main.lifespan", mock_lifespan):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
            yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def admin_token(session: AsyncSession) -> str:
    """Create the admin user and return a valid bearer token for it."""
    auth = AuthService(session)
    await auth.set_password("admin", "admin123")
    return auth.generate_token("admin")


@pytest.fixture
def auth_headers(admin_token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {admin_token}"}


@pytest_asyncio.fixture
async def category_id(client: AsyncClient, auth_headers: Dict[str, str]) -> str:
    response = await client.post("/api/admin/product-categories", json={"name": "Motors"}, headers=auth_headers)
    assert response.status_code == 201
    return response.json()["data"]["id"]
