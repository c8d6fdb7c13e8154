"""Database Session Manager: async connection pool with automatic rollback and drain on shutdown.

Invariants:
    - Exactly one engine (and pool) per process, built by init_db() in the lifespan
    - Every request gets its own AsyncSession via get_db(), released when the request ends
    - Every session rolls back on an exception escaping its scope (no partial commits)
    - close_db() disposes the engine: checked-in connections closed, pool emptied
    - Connections to PostgreSQL use TLS unless database_ssl is "disable"

Design Decisions:
    - Module-level db_manager initialized on startup: FastAPI lifespan manages lifecycle
      (no import-time side effects)
    - expire_on_commit=False: prevents lazy-load issues in async context
    - SQLAlchemyError mapped to DatabaseError only as a safety net; route handlers catch
      store errors themselves to attach a route-specific message
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from app.core.errors import DatabaseError

logger = logging.getLogger(__name__)


def build_connect_args(database_url: str, ssl: str | None) -> dict:
    """asyncpg connect kwargs for the configured TLS mode."""
    if not database_url.startswith("postgresql"):
        return {}
    if not ssl or ssl.lower() == "disable":
        return {}
    return {"ssl": ssl}


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and shutdown drain."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 10,
        max_overflow: int = 10,
        ssl: str | None = "require",
    ):
        self.engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
            pool_recycle=3600,
            connect_args=build_connect_args(database_url, ssl),
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"DB error escaped session scope: {e}")
            raise DatabaseError("Internal server error", "unknown") from e
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def close(self) -> None:
        """Drain the pool. Connections still checked out close on check-in."""
        await self.engine.dispose()


db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def close_db() -> None:
    global db_manager
    if db_manager is None:
        return
    await db_manager.close()
    db_manager = None
    logger.info("Database pool closed")


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session


@asynccontextmanager
async def store_errors(message: str, operation: str) -> AsyncGenerator[None, None]:
    """Translate store failures inside the block into DatabaseError(message).

    Domain errors raised inside the block pass through untouched.
    """
    try:
        yield
    except SQLAlchemyError as e:
        logger.error(
            f"Store failure during {operation}: {e}",
            exc_info=True,
            extra={"operation": operation},
        )
        raise DatabaseError(message, operation) from e
