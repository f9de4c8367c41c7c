"""
Notes API Backend — Database Session Management
=================================================

What:  Async SQLAlchemy engine, session factory, and the per-request session.
How:   build_engine() applies the pool settings for server databases;
       get_db_session() commits on success and rolls back on any error.
Who:   get_note_service (dependencies.py) and the health check.

Pooling (PostgreSQL only):
    DB_POOL_SIZE / DB_MAX_OVERFLOW bound the open connections,
    DB_POOL_PRE_PING drops stale ones, connections recycle hourly.
    SQLite URLs (tests, local runs) keep SQLAlchemy's default pool.
"""

from typing import AsyncGenerator

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from notes_api.config import settings

POOL_RECYCLE_SECONDS = 3600


class Base(DeclarativeBase):
    """Shared metadata for the ORM models; Alembic autogenerates from it."""


def build_engine(database_url: str, **overrides) -> AsyncEngine:
    """Create an async engine for `database_url`, pooled for server backends."""
    options = {"echo": settings.log_level == "DEBUG"}
    if make_url(database_url).get_backend_name() != "sqlite":
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=POOL_RECYCLE_SECONDS,
        )
    options.update(overrides)
    return create_async_engine(database_url, **options)


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Loaded attributes must stay readable after commit: NoteRead is built
    # from the instance once the session is gone
    return async_sessionmaker(bind, class_=AsyncSession, expire_on_commit=False)


engine = build_engine(settings.database_url)
async_session_factory = build_session_factory(engine)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    One session per request.

    The persistence service only flushes; the transaction is committed here
    once the handler has returned, and rolled back if anything raised
    (the error is re-raised for the global exception handlers).
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def dispose_engine() -> None:
    """Close pooled connections on shutdown."""
    await engine.dispose()
