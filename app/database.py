"""Database engine and session management."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.config.settings import DatabaseConfig

# Import models so they are attached to Base.metadata before table creation
from app.models import Base
from app.models import wish  # noqa: F401

logger = logging.getLogger(__name__)


def create_engine(config: DatabaseConfig, *, echo: bool = False) -> AsyncEngine:
    """Create an async engine for the configured SQLite database."""

    engine_options: dict[str, Any] = {
        "echo": echo,
        "future": True,
    }

    if config.in_memory:
        # Every connection to :memory: is a new database; share a single one.
        engine_options["poolclass"] = StaticPool
        engine_options["connect_args"] = {"check_same_thread": False}

    return create_async_engine(config.url, **engine_options)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Return a session factory bound to ``engine``."""

    return async_sessionmaker(
        engine,
        expire_on_commit=False,
        class_=AsyncSession,
    )


async def init_models(engine: AsyncEngine) -> None:
    """Create database tables if they do not exist."""

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Ensured database tables at %s.", engine.url)


async def dispose_engine(engine: AsyncEngine) -> None:
    """Dispose of the engine and release pooled connections."""

    await engine.dispose()
