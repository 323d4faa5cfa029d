"""
Subject entity model.
"""

from __future__ import annotations

from datetime import datetime

from sqlmodel import Field

from unitracker.core.time_utils import new_id, utc_now

from ..base import Base, naive_datetime_column_type

DEFAULT_SUBJECT_COLOR = "#8B5CF6"
DEFAULT_SUBJECT_ICON = "📚"


class Subject(Base, table=True):
    """A course or topic the user studies.

    Table: subjects
    """

    __tablename__ = "subjects"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)
    user_id: str = Field(foreign_key="users.id", index=True, max_length=64)

    name: str = Field(max_length=255)
    color: str = Field(default=DEFAULT_SUBJECT_COLOR, max_length=16)
    icon: str = Field(default=DEFAULT_SUBJECT_ICON, max_length=16)
    target_hours: int = Field(default=10, ge=0)

    created_at: datetime = Field(default_factory=utc_now, index=True, sa_type=naive_datetime_column_type())
    updated_at: datetime = Field(default_factory=utc_now, sa_type=naive_datetime_column_type())

    def __repr__(self) -> str:
        return f"Subject(id={self.id}, name={self.name!r})"
