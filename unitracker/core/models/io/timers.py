"""
Timer planning response models.
"""

from __future__ import annotations

from unitracker.core.models.domain.enums import PomodoroPhase

from .base import ApiModel


class PomodoroPhaseRead(ApiModel):
    """The phase a pomodoro cycle moves to next."""

    phase: PomodoroPhase
    duration_minutes: int
    completed_focus_sessions: int
