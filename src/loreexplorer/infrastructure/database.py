"""SQLAlchemy async database setup."""

import logging
from functools import lru_cache

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from loreexplorer.config import Settings, get_settings

logger = logging.getLogger(__name__)

SessionFactory = async_sessionmaker[AsyncSession]


def create_session_factory(settings: Settings) -> SessionFactory | None:
    """Build a session factory, or None when no database URL is configured."""
    if not settings.store_configured:
        logger.warning("DATABASE_URL is not set. Location store is unconfigured.")
        return None

    engine_kwargs = {}
    if not settings.database_url.startswith("sqlite"):
        # Connection pooling for server databases
        engine_kwargs = {"pool_size": 5, "max_overflow": 10}

    engine = create_async_engine(
        settings.database_url,
        echo=False,
        **engine_kwargs,
    )

    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@lru_cache
def get_session_factory() -> SessionFactory | None:
    """Get the cached application-wide session factory."""
    return create_session_factory(get_settings())
