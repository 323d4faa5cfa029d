"""Domain enums shared by entities, I/O models and services."""

from __future__ import annotations

from enum import Enum


class TaskStatus(str, Enum):
    """Kanban column a task sits in."""

    todo = "todo"
    in_progress = "in_progress"
    done = "done"


class TaskPriority(str, Enum):
    """Task priority shown as a badge on the board."""

    low = "low"
    medium = "medium"
    high = "high"


class SessionType(str, Enum):
    """Which timer produced a study session."""

    study = "study"  # Open-ended stopwatch session.
    pomodoro = "pomodoro"
    countdown = "countdown"
    break_ = "break"


class TimerMode(str, Enum):
    """Direction a timer counts in."""

    countdown = "countdown"
    stopwatch = "stopwatch"


class TimerState(str, Enum):
    """Lifecycle of a single timer."""

    idle = "idle"
    running = "running"
    paused = "paused"
    finished = "finished"


class PomodoroPhase(str, Enum):
    """Phases of the pomodoro cycle."""

    focus = "focus"
    short_break = "short_break"
    long_break = "long_break"
