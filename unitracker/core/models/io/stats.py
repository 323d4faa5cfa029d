"""
Dashboard statistics response models.
"""

from __future__ import annotations

from typing import List

from .base import ApiModel


class DailyStudyTime(ApiModel):
    day: str
    hours: float


class SubjectProgress(ApiModel):
    subject: str
    hours: float
    tasks_completed: int


class UserStats(ApiModel):
    """Aggregated numbers shown on the dashboard."""

    today_study_time: int
    completed_tasks_today: int
    total_tasks_today: int
    current_streak: int
    focus_score: int
    weekly_study_time: List[DailyStudyTime]
    subject_progress: List[SubjectProgress]
