"""
User preferences I/O models.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from .base import ApiModel, PartialUpdate, UtcDatetime


class PreferencesRead(ApiModel):
    """Schema for reading user preferences."""

    id: str
    user_id: str
    pomodoro_duration: int
    short_break_duration: int
    long_break_duration: int
    long_break_interval: int
    daily_goal_hours: int
    theme: str
    sound_enabled: bool
    focus_sound: str
    notifications_enabled: bool
    updated_at: UtcDatetime


class PreferencesUpsert(PartialUpdate):
    """Schema for creating or updating preferences.

    Unsent fields keep their stored value, or the default for a new row.
    """

    pomodoro_duration: Optional[int] = Field(default=None, gt=0)
    short_break_duration: Optional[int] = Field(default=None, gt=0)
    long_break_duration: Optional[int] = Field(default=None, gt=0)
    long_break_interval: Optional[int] = Field(default=None, gt=0)
    daily_goal_hours: Optional[int] = Field(default=None, ge=0)
    theme: Optional[str] = Field(default=None, max_length=32)
    sound_enabled: Optional[bool] = None
    focus_sound: Optional[str] = Field(default=None, max_length=32)
    notifications_enabled: Optional[bool] = None
