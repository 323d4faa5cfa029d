"""
Stats Endpoint.

Dashboard numbers computed from the user's sessions, tasks and subjects.
"""

from fastapi import APIRouter

from unitracker.core.models.io import UserStats
from unitracker.server.services.deps import CurrentUserDep, ReposDep
from unitracker.server.services.stats import get_user_stats

router = APIRouter(tags=["stats"])


@router.get(
    "",
    response_model=UserStats,
    summary="Get Dashboard Stats",
    description="Today's study time and tasks, the current streak, focus score, this week's hours and per-subject progress.",
    response_description="Aggregated statistics for the acting user.",
)
async def read_stats(user: CurrentUserDep, repos: ReposDep) -> UserStats:
    """
    Get dashboard statistics.

    Days are calendar days in the server's configured timezone
    (`UNITRACKER_TIMEZONE`). The streak is not broken until a day with no
    study time is over.
    """
    return await get_user_stats(repos, user.id)
