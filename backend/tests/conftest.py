"""Root conftest: environment isolation and shared database fixtures.

Invariants:
    - Tests never reach a real database: DATABASE_URL points at in-memory SQLite
    - Every test gets a fresh in-memory database with all tables created
    - test_manager swaps the module-level db_manager for one bound to the test engine
"""

import os

# Never reach a real database from tests
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("DATABASE_SSL", "disable")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, async_sessionmaker, create_async_engine,
)

import app.infrastructure.database as db_module  # noqa: E402
import app.models  # noqa: E402,F401
from app.db.base import Base  # noqa: E402
from app.infrastructure.database import DatabaseSessionManager  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
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
async def test_manager(test_engine, test_session_factory):
    """db_manager bound to the test engine; restored afterwards."""
    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager
    yield fake_manager
    db_module.db_manager = original_manager
