"""API test fixtures — FastAPI test client over a memory or SQLite-backed store.

Invariants:
    - Every test gets a fresh store (new InMemoryStore or new in-memory SQLite database)
    - Settings overridden per client so policy flags are explicit in each test
    - Lifespan is not run by ASGITransport; fixtures wire app.state and db_manager directly

Design Decisions:
    - Memory client is the default: fast, no hashing round-trips through SQL
    - sql_client mirrors the memory client over SqlStore to cover the production path
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from skillswap.api.dependencies import get_store
from skillswap.config import Settings, get_settings
from skillswap.db.base import Base
from skillswap.infrastructure.database import DatabaseSessionManager
from skillswap.infrastructure.memory_store import InMemoryStore
from skillswap.infrastructure.sql_store import SqlStore
import skillswap.infrastructure.database as db_module
import skillswap.models  # noqa: F401
from skillswap.main import app


@pytest.fixture
def settings():
    return Settings(store_backend="memory", match_jitter=False)


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
async def client(settings, store):
    """Test client over a fresh InMemoryStore."""
    app.state.store = store
    app.dependency_overrides[get_settings] = lambda: settings

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    del app.state.store


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def sql_client(test_engine):
    """Test client over SqlStore with the store dependency bound to the test engine."""
    factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )

    async def override_get_store():
        async with factory() as session:
            yield SqlStore(session)

    app.dependency_overrides[get_store] = override_get_store
    app.dependency_overrides[get_settings] = lambda: Settings(
        store_backend="sql", match_jitter=False,
    )

    # Readiness probe reads db_manager directly
    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def make_user(store):
    """Insert a user straight into the memory store (no password hashing)."""
    async def _make(username: str, **fields):
        return await store.create_user(
            username=username, email=f"{username}@example.com",
            password_hash="unused", **fields,
        )
    return _make
