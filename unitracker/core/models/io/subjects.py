"""
Subject I/O models for API requests and responses.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from unitracker.core.database.entities.subjects import DEFAULT_SUBJECT_COLOR, DEFAULT_SUBJECT_ICON

from .base import ApiModel, PartialUpdate, UtcDatetime

HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class SubjectRead(ApiModel):
    """Schema for reading a subject."""

    id: str
    user_id: str
    name: str
    color: str
    icon: str
    target_hours: int
    created_at: UtcDatetime
    updated_at: UtcDatetime


class SubjectCreate(ApiModel):
    """Schema for creating a subject."""

    name: str = Field(min_length=1, max_length=255)
    color: str = Field(default=DEFAULT_SUBJECT_COLOR, pattern=HEX_COLOR_PATTERN)
    icon: str = Field(default=DEFAULT_SUBJECT_ICON, max_length=16)
    target_hours: int = Field(default=10, ge=0)


class SubjectUpdate(PartialUpdate):
    """Schema for a partial subject update."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    color: Optional[str] = Field(default=None, pattern=HEX_COLOR_PATTERN)
    icon: Optional[str] = Field(default=None, max_length=16)
    target_hours: Optional[int] = Field(default=None, ge=0)
