"""Domain exceptions for UniTracker."""

from typing import Any, Dict, Optional


class UniTrackerError(Exception):
    """Base exception for all UniTracker domain errors."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class TimerStateError(UniTrackerError):
    """Raised when a timer operation is not allowed in the timer's current state."""


class InvalidSessionTimesError(UniTrackerError):
    """Raised when a study session would end before it started."""
