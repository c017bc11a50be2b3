"""Shared fixtures.

API tests run the application against an in-memory SQLite database
that is created for every test, with the supported languages seeded
and uploads written to a temporary directory.
"""

from collections.abc import AsyncGenerator
from pathlib import Path

import httpx
import pytest
import pytest_asyncio
from passlib.context import CryptContext
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from plumbing.application.auth_service import reset_password_context
from plumbing.infrastructure import models  # noqa: F401
from plumbing.infrastructure.database import Base, get_session
from plumbing.infrastructure.media import MediaStorage, reset_media_storage
from plumbing.infrastructure.models import Language
from plumbing.main import app

TEST_BASE_URL = "http://test"

LANGUAGES = [
    Language(code="ru", name="Русский"),
    Language(code="kgz", name="Кыргызча"),
    Language(code="en", name="English"),
]


# ============================================================================
# Process-wide Overrides
# ============================================================================


@pytest.fixture(autouse=True)
def fast_password_hashing():
    """Use the cheapest bcrypt cost so that login round-trips stay fast."""
    reset_password_context(
        CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=4)
    )
    yield
    reset_password_context()


@pytest.fixture(autouse=True)
def media_storage(tmp_path: Path) -> MediaStorage:
    """Write uploads to a temporary directory."""
    storage = MediaStorage(tmp_path / "images", "media/images", TEST_BASE_URL)
    reset_media_storage(storage)
    yield storage
    reset_media_storage()


# ============================================================================
# Database Fixtures
# ============================================================================


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create an in-memory database with every table and the languages."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        session.add_all(
            [Language(code=language.code, name=language.name) for language in LANGUAGES]
        )
        await session.commit()

    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test database."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Session for tests that call services directly."""
    async with session_factory() as session:
        yield session


# ============================================================================
# Client Fixtures
# ============================================================================


@pytest_asyncio.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Create an async test client bound to the test database."""

    async def override_get_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_session] = override_get_session
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url=TEST_BASE_URL) as client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def auth_headers(client: httpx.AsyncClient) -> dict[str, str]:
    """Register an administrator and return bearer headers for it."""
    credentials = {"username": "admin", "password": "admin-password"}
    response = await client.post("/api/register", json=credentials)
    assert response.status_code == 201

    response = await client.post("/api/login", json=credentials)
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}
