"""
Database repository layer using SQLModel.

This package contains all repository classes, one module per table. Each
module provides async data access operations for its SQLModel entity.

Modules:
- base: AsyncBaseRepository interface, QueryBuilder and UserScopedRepository
- users: Account and profile operations
- tasks: Kanban task operations
- notes: Note operations
- study_sessions: Timer session operations
- user_preferences: Preferences upsert
- subjects: Subject operations
- bundle: All repositories over one session
"""

from .bundle import SqlRepoBundle, build_sql_repos_from_session
from .notes import NoteRepository
from .study_sessions import StudySessionRepository
from .subjects import SubjectRepository
from .tasks import TaskRepository
from .user_preferences import UserPreferencesRepository
from .users import UserRepository

__all__ = [
    "NoteRepository",
    "SqlRepoBundle",
    "StudySessionRepository",
    "SubjectRepository",
    "TaskRepository",
    "UserPreferencesRepository",
    "UserRepository",
    "build_sql_repos_from_session",
]
