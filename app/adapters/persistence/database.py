"""Async SQLAlchemy engine, session factory and declarative base."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Iterator
from contextlib import contextmanager

from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.config import settings
from app.domain.errors import StorageUnavailableError

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


def _build_engine(url: str) -> AsyncEngine | None:
    if not url:
        return None
    return create_async_engine(url, echo=settings.debug, pool_pre_ping=True)


engine = _build_engine(settings.database_url)

async_session_factory: async_sessionmaker[AsyncSession] | None = (
    async_sessionmaker(engine, expire_on_commit=False) if engine is not None else None
)


@contextmanager
def storage_errors(action: str) -> Iterator[None]:
    """Turn connection-level failures into StorageUnavailableError."""
    try:
        yield
    except (OperationalError, InterfaceError, OSError) as e:
        logger.exception("Database unavailable while trying to %s", action)
        raise StorageUnavailableError(f"Database unavailable: {e}") from e


def dialect_name() -> str:
    """Dialect of the configured engine; PostgreSQL when none is configured."""
    return engine.dialect.name if engine is not None else "postgresql"


async def get_session() -> AsyncIterator[AsyncSession]:
    """FastAPI dependency — one session per request, rolled back if not committed."""
    if async_session_factory is None:
        raise StorageUnavailableError("DATABASE_URL is not configured")
    async with async_session_factory() as session:
        yield session


async def commit_session(session: AsyncSession) -> None:
    with storage_errors("commit"):
        await session.commit()
