"""Async database engine and session configuration."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Any

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "postgresql+asyncpg://localhost:5432/subshop"

DATABASE_URL = os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)

# Only applied to server databases; SQLite keeps its driver default pool.
SERVER_POOL_OPTIONS: dict[str, Any] = {"pool_size": 20, "max_overflow": 10}


def make_engine(url: str, **kwargs: Any) -> AsyncEngine:
    """Create an async engine for *url*. *kwargs* override the defaults."""
    options: dict[str, Any] = {"echo": False}
    if make_url(url).get_backend_name() != "sqlite":
        options.update(SERVER_POOL_OPTIONS)
    options.update(kwargs)
    return create_async_engine(url, **options)


def make_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind, class_=AsyncSession, expire_on_commit=False)


engine = make_engine(DATABASE_URL)

async_session_factory = make_session_factory(engine)


async def get_db() -> AsyncGenerator[AsyncSession]:
    """FastAPI dependency: one session per request, committed on success."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            logger.debug("Rolling back request session")
            await session.rollback()
            raise
