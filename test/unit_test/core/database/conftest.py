"""Test configuration for database unit tests.

Provides an in-memory SQLite engine with every table created, a session on
it and a stored user that owns the rows under test.
"""

from __future__ import annotations

from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlmodel.pool import StaticPool

from unitracker.core.database.entities.users import User
from unitracker.core.database.repositories import SqlRepoBundle, build_sql_repos_from_session
from unitracker.core.database.utils import create_all, create_sessionmaker


@pytest.fixture(scope="function")
async def in_memory_engine() -> AsyncGenerator:
    """Create in-memory SQLite engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture(scope="function")
async def in_memory_session(in_memory_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create in-memory SQLite session for testing."""
    async_session = create_sessionmaker(in_memory_engine)
    async with async_session() as session:
        yield session


@pytest.fixture(scope="function")
def repos(in_memory_session: AsyncSession) -> SqlRepoBundle:
    return build_sql_repos_from_session(session=in_memory_session)


@pytest.fixture(scope="function")
async def user(repos: SqlRepoBundle) -> User:
    return await repos.users.create(User(id="user-1", email="user1@example.com", first_name="Ada", last_name="Lovelace"))


@pytest.fixture(scope="function")
async def other_user(repos: SqlRepoBundle) -> User:
    return await repos.users.create(User(id="user-2", email="user2@example.com"))


@pytest.fixture(scope="function")
async def file_engine(tmp_path) -> AsyncGenerator:
    """File-backed SQLite engine where every session checks out its own connection."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'unitracker.db'}")
    await create_all(engine)
    try:
        yield engine
    finally:
        await engine.dispose()
