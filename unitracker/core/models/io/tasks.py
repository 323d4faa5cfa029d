"""
Task I/O models for API requests and responses.
"""

from __future__ import annotations

from typing import ClassVar, FrozenSet, Optional

from pydantic import Field

from unitracker.core.models.domain.enums import TaskPriority, TaskStatus

from .base import ApiModel, InputDatetime, OptionalUtcDatetime, PartialUpdate, UtcDatetime


class TaskRead(ApiModel):
    """Schema for reading a task."""

    id: str
    user_id: str
    title: str
    description: Optional[str] = None
    status: TaskStatus
    priority: TaskPriority
    subject: Optional[str] = None
    due_date: OptionalUtcDatetime = None
    progress: int
    completed_at: OptionalUtcDatetime = None
    created_at: UtcDatetime
    updated_at: UtcDatetime


class TaskCreate(ApiModel):
    """Schema for creating a task."""

    title: str = Field(min_length=1, max_length=500)
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.todo
    priority: TaskPriority = TaskPriority.medium
    subject: Optional[str] = Field(default=None, max_length=255)
    due_date: Optional[InputDatetime] = None
    progress: int = Field(default=0, ge=0, le=100)
    completed_at: Optional[InputDatetime] = None


class TaskUpdate(PartialUpdate):
    """Schema for a partial task update, e.g. dragging a card to another column."""

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"description", "subject", "due_date", "completed_at"})

    title: Optional[str] = Field(default=None, min_length=1, max_length=500)
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    subject: Optional[str] = Field(default=None, max_length=255)
    due_date: Optional[InputDatetime] = None
    progress: Optional[int] = Field(default=None, ge=0, le=100)
    completed_at: Optional[InputDatetime] = None
