"""
Repository bundle for dependency injection.

This module provides a convenience bundle of all repository instances
sharing one session, for services and API endpoints.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .notes import NoteRepository
from .study_sessions import StudySessionRepository
from .subjects import SubjectRepository
from .tasks import TaskRepository
from .user_preferences import UserPreferencesRepository
from .users import UserRepository


@dataclass(frozen=True)
class SqlRepoBundle:
    """Convenience bundle of all SQL repositories for dependency injection."""

    session: AsyncSession
    users: UserRepository
    tasks: TaskRepository
    notes: NoteRepository
    study_sessions: StudySessionRepository
    preferences: UserPreferencesRepository
    subjects: SubjectRepository


def build_sql_repos_from_session(*, session: AsyncSession) -> SqlRepoBundle:
    """Build a SqlRepoBundle from an existing session.

    Args:
        session: Existing async session

    Returns:
        Bundle containing all repository instances
    """
    return SqlRepoBundle(
        session=session,
        users=UserRepository(session),
        tasks=TaskRepository(session),
        notes=NoteRepository(session),
        study_sessions=StudySessionRepository(session),
        preferences=UserPreferencesRepository(session),
        subjects=SubjectRepository(session),
    )
