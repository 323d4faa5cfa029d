"""
Timer Endpoints.

Pomodoro phase planning from the user's saved phase lengths.
"""

from typing import Annotated

from fastapi import APIRouter, Query

from unitracker.core.models.domain.enums import PomodoroPhase
from unitracker.core.models.io import PomodoroPhaseRead
from unitracker.core.timers import PomodoroCycle
from unitracker.server.services.deps import CurrentUserDep, ReposDep

router = APIRouter(tags=["timers"])


@router.get(
    "/pomodoro/next",
    response_model=PomodoroPhaseRead,
    summary="Next Pomodoro Phase",
    description="Which phase follows the current one, and for how long, using the user's preferences or the defaults.",
)
async def next_pomodoro_phase(
    user: CurrentUserDep,
    repos: ReposDep,
    completed_focus_sessions: Annotated[int, Query(alias="completedFocusSessions", ge=0)] = 0,
    current_phase: Annotated[PomodoroPhase, Query(alias="currentPhase")] = PomodoroPhase.focus,
) -> PomodoroPhaseRead:
    """
    Plan the next pomodoro phase.

    - **completedFocusSessions**: Focus sessions finished before the current phase.
    - **currentPhase**: `focus`, `short_break` or `long_break`.

    Ending a focus phase counts it as completed; every `longBreakInterval`-th
    completed focus session is followed by a long break.
    """
    preferences = await repos.preferences.get_by_user(user.id)
    if preferences is None:
        cycle = PomodoroCycle()
    else:
        cycle = PomodoroCycle(
            focus=preferences.pomodoro_duration,
            short_break=preferences.short_break_duration,
            long_break=preferences.long_break_duration,
            long_break_interval=preferences.long_break_interval,
        )

    phase, minutes, completed = cycle.next_phase(completed_focus_sessions, current_phase)
    return PomodoroPhaseRead(phase=phase, duration_minutes=minutes, completed_focus_sessions=completed)
