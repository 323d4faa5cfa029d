"""
Domain models for UniTracker.
"""

from .enums import (
    PomodoroPhase,
    SessionType,
    TaskPriority,
    TaskStatus,
    TimerMode,
    TimerState,
)

__all__ = [
    "PomodoroPhase",
    "SessionType",
    "TaskPriority",
    "TaskStatus",
    "TimerMode",
    "TimerState",
]
