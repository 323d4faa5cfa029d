"""
User preferences entity model.

One row per user holding timer lengths, the daily goal and UI toggles.
"""

from __future__ import annotations

from datetime import datetime

from sqlmodel import Field

from unitracker.core.time_utils import new_id, utc_now

from ..base import Base, naive_datetime_column_type

DEFAULT_POMODORO_MINUTES = 25
DEFAULT_SHORT_BREAK_MINUTES = 5
DEFAULT_LONG_BREAK_MINUTES = 15
DEFAULT_LONG_BREAK_INTERVAL = 4


class UserPreferences(Base, table=True):
    """Per-user settings.

    Table: user_preferences
    """

    __tablename__ = "user_preferences"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)
    user_id: str = Field(foreign_key="users.id", unique=True, index=True, max_length=64)

    pomodoro_duration: int = Field(default=DEFAULT_POMODORO_MINUTES, gt=0)
    short_break_duration: int = Field(default=DEFAULT_SHORT_BREAK_MINUTES, gt=0)
    long_break_duration: int = Field(default=DEFAULT_LONG_BREAK_MINUTES, gt=0)
    long_break_interval: int = Field(default=DEFAULT_LONG_BREAK_INTERVAL, gt=0)
    daily_goal_hours: int = Field(default=4, ge=0)

    theme: str = Field(default="system", max_length=32)
    sound_enabled: bool = Field(default=True)
    focus_sound: str = Field(default="none", max_length=32)
    notifications_enabled: bool = Field(default=True)

    updated_at: datetime = Field(default_factory=utc_now, sa_type=naive_datetime_column_type())

    def __repr__(self) -> str:
        return f"UserPreferences(user_id={self.user_id}, pomodoro={self.pomodoro_duration})"
