"""
Request Dependencies.

Provides the per-request database session, the repository bundle built on it
and the acting user for API endpoints.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from unitracker.core.database import get_session
from unitracker.core.database.entities.users import User
from unitracker.core.database.repositories import SqlRepoBundle, build_sql_repos_from_session
from unitracker.core.logging_config import get_logger
from unitracker.server.core.config import settings

logger = get_logger(__name__)

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_repos(session: SessionDep) -> SqlRepoBundle:
    return build_sql_repos_from_session(session=session)


ReposDep = Annotated[SqlRepoBundle, Depends(get_repos)]


async def get_current_user(repos: ReposDep) -> User:
    """
    Resolve the acting user.

    Authentication is stubbed: every request acts as the configured demo
    account, which is created on first use. An existing row is returned as-is
    so that profile edits survive, and parallel first requests share one row.
    """
    demo = settings.demo_user
    user, created = await repos.users.get_or_create(
        User(id=demo.id, email=demo.email, first_name=demo.first_name, last_name=demo.last_name)
    )
    if created:
        logger.info(f"Created demo user {demo.id}")
    return user


CurrentUserDep = Annotated[User, Depends(get_current_user)]
