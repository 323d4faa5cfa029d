"""
Study session entity model.

A study session is what a timer leaves behind: when it started, when it
ended, how many minutes counted and whether it ran to completion.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from sqlmodel import Field

from unitracker.core.exceptions import InvalidSessionTimesError
from unitracker.core.models.domain.enums import SessionType
from unitracker.core.time_utils import new_id, utc_now

from ..base import Base, enum_column_type, naive_datetime_column_type


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole minutes from ``start`` to ``end``, floored at zero."""
    return max(int((end - start).total_seconds() // 60), 0)


class StudySession(Base, table=True):
    """A timed study session.

    Table: study_sessions
    """

    __tablename__ = "study_sessions"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)
    user_id: str = Field(foreign_key="users.id", index=True, max_length=64)

    type: SessionType = Field(default=SessionType.study, sa_type=enum_column_type(SessionType))
    subject: Optional[str] = Field(default=None, max_length=255)
    start_time: datetime = Field(default_factory=utc_now, index=True, sa_type=naive_datetime_column_type())
    end_time: Optional[datetime] = Field(default=None, sa_type=naive_datetime_column_type())
    duration: int = Field(default=0, ge=0, description="Counted minutes")
    planned_duration: Optional[int] = Field(default=None, ge=0, description="Planned minutes")
    completed: bool = Field(default=False)

    created_at: datetime = Field(default_factory=utc_now, sa_type=naive_datetime_column_type())

    def check_times(self) -> None:
        """Raise when the session ends before it starts."""
        if self.end_time is not None and self.end_time < self.start_time:
            raise InvalidSessionTimesError(
                "Study session cannot end before it starts",
                context={"start_time": self.start_time.isoformat(), "end_time": self.end_time.isoformat()},
            )

    def fill_duration(self) -> None:
        """Derive ``duration`` from the start and end times."""
        if self.end_time is not None:
            self.duration = minutes_between(self.start_time, self.end_time)

    def apply_changes(self, changes: Dict[str, Any]) -> None:
        """Apply a partial update, deriving ``duration`` when only the end time is sent."""
        for key, value in changes.items():
            setattr(self, key, value)
        self.check_times()
        if "end_time" in changes and "duration" not in changes:
            self.fill_duration()

    def __repr__(self) -> str:
        return f"StudySession(id={self.id}, type={self.type}, duration={self.duration})"
