"""
Task entity model.

Tasks are the cards on the Kanban board. Moving a card between columns is
an update of ``status``; the completion bookkeeping that goes with a move
into or out of the ``done`` column lives on the entity so that every write
path applies it the same way.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from sqlmodel import Field

from unitracker.core.models.domain.enums import TaskPriority, TaskStatus
from unitracker.core.time_utils import new_id, utc_now

from ..base import Base, enum_column_type, naive_datetime_column_type


class Task(Base, table=True):
    """A Kanban task.

    Table: tasks
    """

    __tablename__ = "tasks"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)
    user_id: str = Field(foreign_key="users.id", index=True, max_length=64)

    title: str = Field(max_length=500)
    description: Optional[str] = Field(default=None)
    status: TaskStatus = Field(default=TaskStatus.todo, sa_type=enum_column_type(TaskStatus))
    priority: TaskPriority = Field(default=TaskPriority.medium, sa_type=enum_column_type(TaskPriority))
    subject: Optional[str] = Field(default=None, max_length=255)
    due_date: Optional[datetime] = Field(default=None, sa_type=naive_datetime_column_type())
    progress: int = Field(default=0, ge=0, le=100)
    completed_at: Optional[datetime] = Field(default=None, sa_type=naive_datetime_column_type())

    created_at: datetime = Field(default_factory=utc_now, index=True, sa_type=naive_datetime_column_type())
    updated_at: datetime = Field(default_factory=utc_now, sa_type=naive_datetime_column_type())

    def mark_created(self) -> None:
        """Apply completion bookkeeping to a task created straight into ``done``."""
        if self.status == TaskStatus.done and self.completed_at is None:
            self.completed_at = utc_now()
            self.progress = 100

    def apply_changes(self, changes: Dict[str, Any]) -> None:
        """Apply a partial update.

        ``changes`` holds only the fields the client sent. When ``status``
        moves into ``done`` without an explicit ``completed_at``, the task is
        stamped complete; when it moves out of ``done`` the stamp is cleared.
        """
        previous_status = self.status
        for key, value in changes.items():
            setattr(self, key, value)

        new_status = changes.get("status")
        if new_status is None or new_status == previous_status or "completed_at" in changes:
            return
        if new_status == TaskStatus.done:
            self.completed_at = utc_now()
            if "progress" not in changes:
                self.progress = 100
        elif previous_status == TaskStatus.done:
            self.completed_at = None

    def __repr__(self) -> str:
        return f"Task(id={self.id}, title={self.title!r}, status={self.status})"
