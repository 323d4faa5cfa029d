"""
Task repository.

Data access for Kanban tasks.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.tasks import Task
from .base import UserScopedRepository


class TaskRepository(UserScopedRepository[Task]):
    """Repository for task data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Task)
