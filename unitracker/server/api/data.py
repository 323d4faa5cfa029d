"""
Data Reset Endpoints.

Both paths wipe everything the acting user has recorded and keep the account.
"""

from fastapi import APIRouter, HTTPException, status

from unitracker.core.database.repositories import SqlRepoBundle
from unitracker.core.logging_config import get_logger
from unitracker.core.models.io import MessageResponse
from unitracker.server.services.data_reset import delete_all_user_data
from unitracker.server.services.deps import CurrentUserDep, ReposDep

logger = get_logger(__name__)

router = APIRouter(tags=["data"])


async def _reset(user_id: str, repos: SqlRepoBundle, message: str) -> MessageResponse:
    if not await delete_all_user_data(repos, user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return MessageResponse(message=message)


@router.post(
    "/data/reset",
    response_model=MessageResponse,
    summary="Reset User Data",
    description="Delete the acting user's sessions, notes, tasks, subjects and preferences and clear major and hobbies. The account stays.",
    responses={500: {"description": "Database error; nothing was deleted"}},
)
async def reset_data(user: CurrentUserDep, repos: ReposDep) -> MessageResponse:
    logger.info(f"Data reset requested by user {user.id}")
    return await _reset(user.id, repos, "All data reset successfully")


@router.post(
    "/demo/clear",
    response_model=MessageResponse,
    summary="Clear Demo Data",
    description="Same as `/api/data/reset`; kept for the demo page.",
)
async def clear_demo_data(user: CurrentUserDep, repos: ReposDep) -> MessageResponse:
    logger.info(f"Demo data clear requested by user {user.id}")
    return await _reset(user.id, repos, "Demo data cleared successfully")
