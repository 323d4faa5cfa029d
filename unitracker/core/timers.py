"""
Timer and pomodoro cycle model.

One timer implementation backs every timer the client shows: the pomodoro,
the countdown and the open-ended stopwatch. Elapsed time is measured from
an injected monotonic clock instead of counting ticks, so a paused timer does
not drift and resuming never counts the same interval twice.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from unitracker.core.exceptions import TimerStateError
from unitracker.core.models.domain.enums import PomodoroPhase, TimerMode, TimerState

Clock = Callable[[], float]


class Timer:
    """A countdown or stopwatch driven by a monotonic clock.

    A countdown finishes once ``duration_seconds`` have elapsed. A stopwatch
    runs until it is paused or reset and never finishes.
    """

    def __init__(
        self,
        mode: TimerMode,
        duration_seconds: Optional[float] = None,
        clock: Clock = time.monotonic,
    ) -> None:
        if mode == TimerMode.countdown and (duration_seconds is None or duration_seconds <= 0):
            raise ValueError("A countdown timer needs a positive duration")
        self.mode = mode
        self.duration_seconds = duration_seconds if mode == TimerMode.countdown else None
        self._clock = clock
        self._state = TimerState.idle
        self._accumulated = 0.0
        self._started_at: Optional[float] = None

    @property
    def state(self) -> TimerState:
        self._check_finished()
        return self._state

    def start(self) -> None:
        """Start from idle or resume from paused. Starting a running timer does nothing."""
        state = self.state
        if state == TimerState.finished:
            raise TimerStateError("Cannot start a finished timer; reset it first", context={"mode": self.mode.value})
        if state == TimerState.running:
            return
        self._started_at = self._clock()
        self._state = TimerState.running

    def pause(self) -> None:
        state = self.state
        if state != TimerState.running:
            raise TimerStateError(f"Cannot pause a timer that is {state.value}", context={"mode": self.mode.value})
        self._accumulated += self._clock() - self._started_at  # type: ignore[operator]
        self._started_at = None
        self._state = TimerState.paused

    def reset(self) -> None:
        self._accumulated = 0.0
        self._started_at = None
        self._state = TimerState.idle

    def elapsed(self) -> float:
        """Seconds counted so far. A countdown never reports more than its duration."""
        self._check_finished()
        return self._raw_elapsed()

    def remaining(self) -> Optional[float]:
        """Seconds left on a countdown, never negative. ``None`` for a stopwatch."""
        if self.duration_seconds is None:
            return None
        return max(self.duration_seconds - self.elapsed(), 0.0)

    def _raw_elapsed(self) -> float:
        elapsed = self._accumulated
        if self._started_at is not None:
            elapsed += self._clock() - self._started_at
        if self.duration_seconds is not None:
            elapsed = min(elapsed, self.duration_seconds)
        return elapsed

    def _check_finished(self) -> None:
        if self._state != TimerState.running or self.duration_seconds is None:
            return
        if self._raw_elapsed() >= self.duration_seconds:
            self._accumulated = self.duration_seconds
            self._started_at = None
            self._state = TimerState.finished

    def __repr__(self) -> str:
        return f"Timer(mode={self.mode.value}, state={self._state.value}, elapsed={self._raw_elapsed():.1f}s)"


@dataclass(frozen=True)
class PomodoroCycle:
    """Phase lengths, in minutes, of a pomodoro cycle."""

    focus: int = 25
    short_break: int = 5
    long_break: int = 15
    long_break_interval: int = 4

    def __post_init__(self) -> None:
        for name in ("focus", "short_break", "long_break", "long_break_interval"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")

    def minutes_for(self, phase: PomodoroPhase) -> int:
        if phase == PomodoroPhase.focus:
            return self.focus
        if phase == PomodoroPhase.short_break:
            return self.short_break
        return self.long_break

    def next_phase(self, completed_focus_sessions: int, current_phase: PomodoroPhase) -> Tuple[PomodoroPhase, int, int]:
        """Work out what follows ``current_phase``.

        ``completed_focus_sessions`` counts focus sessions finished before
        ``current_phase``. Ending a focus phase adds one to it, and the break
        that follows is long when the new count is a multiple of
        ``long_break_interval``. Every break is followed by focus.

        Returns:
            The next phase, its length in minutes and the updated count of
            completed focus sessions
        """
        if completed_focus_sessions < 0:
            raise ValueError("completed_focus_sessions cannot be negative")

        if current_phase != PomodoroPhase.focus:
            return PomodoroPhase.focus, self.focus, completed_focus_sessions

        completed = completed_focus_sessions + 1
        phase = PomodoroPhase.long_break if completed % self.long_break_interval == 0 else PomodoroPhase.short_break
        return phase, self.minutes_for(phase), completed
