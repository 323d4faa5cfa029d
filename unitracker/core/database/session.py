"""
Global database session and engine management.

This module manages the global AsyncEngine and async_sessionmaker instances
that are used throughout the application for database access.
"""

from __future__ import annotations

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from unitracker.core.logging_config import get_logger
from unitracker.server.core.config import settings

from .utils import create_all, create_engine, create_sessionmaker

logger = get_logger(__name__)

engine = create_engine(settings.database_url)
async_session_maker = create_sessionmaker(engine)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency generator for database sessions.

    Yields:
        AsyncSession: An asynchronous SQLAlchemy session.
    """
    async with async_session_maker() as session:
        yield session


async def init_db() -> None:
    """
    Initialize the database.

    Creates missing tables when ``DATABASE_AUTO_CREATE`` is on (development).
    With it off, Alembic migrations own all DDL and this is a no-op.
    """
    if not settings.database_auto_create:
        logger.info("DATABASE_AUTO_CREATE is off; expecting Alembic-managed schema")
        return
    await create_all(engine)
