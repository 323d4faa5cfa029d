"""
Note entity model.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlmodel import JSON, Field

from unitracker.core.time_utils import new_id, utc_now

from ..base import Base, naive_datetime_column_type


class Note(Base, table=True):
    """A free-form note with tags.

    Table: notes
    """

    __tablename__ = "notes"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)
    user_id: str = Field(foreign_key="users.id", index=True, max_length=64)

    title: str = Field(max_length=500)
    content: str = Field(default="")
    tags: List[str] = Field(default_factory=list, sa_type=JSON)
    subject: Optional[str] = Field(default=None, max_length=255)

    created_at: datetime = Field(default_factory=utc_now, sa_type=naive_datetime_column_type())
    updated_at: datetime = Field(default_factory=utc_now, index=True, sa_type=naive_datetime_column_type())

    def __repr__(self) -> str:
        return f"Note(id={self.id}, title={self.title!r})"
