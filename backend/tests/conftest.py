"""Root conftest — shared test configuration and database/app fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - db_manager points at the test engine, so get_db and readiness checks use it
    - The HTTP client talks to the ASGI app in-process (no network)

Design Decisions:
    - SQLite in-memory via aiosqlite: fast, no external dependency
    - StaticPool keeps the single in-memory connection shared across sessions
"""

import os

os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from bookexplorer.db.base import Base  # noqa: E402
from bookexplorer.infrastructure.database import DatabaseSessionManager  # noqa: E402
import bookexplorer.infrastructure.database as db_module  # noqa: E402
from bookexplorer.main import app  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def db_manager(test_engine, test_session_factory):
    """Point the db_manager singleton at the test engine."""
    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager
    yield fake_manager
    db_module.db_manager = original_manager


@pytest.fixture
async def client(db_manager):
    """FastAPI test client backed by the test database."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
