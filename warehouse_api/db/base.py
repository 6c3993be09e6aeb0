"""Async SQLAlchemy engine lifecycle, declarative Base, and FastAPI dependency."""

import logging
from collections.abc import AsyncGenerator

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from warehouse_api.core.config import Settings

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Declarative Base
# ---------------------------------------------------------------------------
class Base(DeclarativeBase):
    """All ORM models inherit from this base."""


# ---------------------------------------------------------------------------
# Engine / pool owner
# ---------------------------------------------------------------------------
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Owns the connection pool.

    ``connect()`` builds the engine and probes it with ``SELECT 1``;
    ``close()`` releases every pooled connection. The application lifespan
    drives both, so operations are only issued between the two.
    """

    def __init__(self, settings: Settings):
        self._settings = settings
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database is not connected")
        return self._engine

    def _engine_kwargs(self) -> dict:
        kwargs: dict = {
            "pool_pre_ping": True,
            "echo": self._settings.is_development,
        }
        # SQLite (local dev / tests) doesn't support connection pooling parameters
        if self._settings.is_sqlite:
            kwargs["connect_args"] = {"check_same_thread": False}
        else:
            kwargs["pool_size"] = self._settings.db_pool_size
        return kwargs

    async def connect(self) -> None:
        engine = create_async_engine(self._settings.database_url, **self._engine_kwargs())
        if self._settings.is_sqlite:
            event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        try:
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception:
            await engine.dispose()
            raise

        self._engine = engine
        self._session_factory = async_sessionmaker(
            bind=engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
        logger.info("Connected to database %s", engine.url.render_as_string(hide_password=True))

    async def close(self) -> None:
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Database connection pool closed")

    def session(self) -> AsyncSession:
        if self._session_factory is None:
            raise RuntimeError("Database is not connected")
        return self._session_factory()


# ---------------------------------------------------------------------------
# FastAPI dependency
# ---------------------------------------------------------------------------
async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield a request-scoped async session; roll back on error."""
    database: Database = request.app.state.db
    async with database.session() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
