"""
Database entity models.

This package contains all database entity models, one module per table.
Importing the package registers every table with the shared SQLModel metadata.

Modules:
- users: Account and profile details
- tasks: Kanban tasks
- notes: Tagged notes
- study_sessions: Timer sessions
- user_preferences: Per-user timer lengths and UI settings
- subjects: Courses and study targets
"""

from . import (
    notes,
    study_sessions,
    subjects,
    tasks,
    user_preferences,
    users,
)
from .notes import Note
from .study_sessions import StudySession
from .subjects import Subject
from .tasks import Task
from .user_preferences import UserPreferences
from .users import User

__all__ = [
    "Note",
    "StudySession",
    "Subject",
    "Task",
    "User",
    "UserPreferences",
    "notes",
    "study_sessions",
    "subjects",
    "tasks",
    "user_preferences",
    "users",
]
