"""
Study session I/O models for API requests and responses.
"""

from __future__ import annotations

from typing import ClassVar, FrozenSet, Optional

from pydantic import Field

from unitracker.core.models.domain.enums import SessionType

from .base import ApiModel, InputDatetime, OptionalUtcDatetime, PartialUpdate, UtcDatetime


class StudySessionRead(ApiModel):
    """Schema for reading a study session."""

    id: str
    user_id: str
    type: SessionType
    subject: Optional[str] = None
    start_time: UtcDatetime
    end_time: OptionalUtcDatetime = None
    duration: int
    planned_duration: Optional[int] = None
    completed: bool
    created_at: UtcDatetime


class StudySessionCreate(ApiModel):
    """Schema for recording a study session.

    ``start_time`` defaults to now. When ``end_time`` is given without a
    ``duration`` the duration is derived from the two times.
    """

    type: SessionType = SessionType.study
    subject: Optional[str] = Field(default=None, max_length=255)
    start_time: Optional[InputDatetime] = None
    end_time: Optional[InputDatetime] = None
    duration: Optional[int] = Field(default=None, ge=0)
    planned_duration: Optional[int] = Field(default=None, ge=0)
    completed: bool = False


class StudySessionUpdate(PartialUpdate):
    """Schema for a partial study session update, typically stopping a timer."""

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"subject", "end_time", "planned_duration"})

    type: Optional[SessionType] = None
    subject: Optional[str] = Field(default=None, max_length=255)
    start_time: Optional[InputDatetime] = None
    end_time: Optional[InputDatetime] = None
    duration: Optional[int] = Field(default=None, ge=0)
    planned_duration: Optional[int] = Field(default=None, ge=0)
    completed: Optional[bool] = None
