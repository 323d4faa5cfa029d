"""
Data Reset Service.

Wipes everything a user has recorded while keeping the account itself.
"""

from sqlalchemy.exc import SQLAlchemyError

from unitracker.core.database.repositories import SqlRepoBundle
from unitracker.core.logging_config import get_logger

logger = get_logger(__name__)


async def delete_all_user_data(repos: SqlRepoBundle, user_id: str) -> bool:
    """
    Delete a user's study sessions, notes, tasks, subjects and preferences and
    clear the profile's major and hobbies.

    Everything happens in one transaction: on a database error the session is
    rolled back and the error propagates, so no table is left half-cleared.

    Args:
        repos: Repository bundle sharing one session
        user_id: User whose data is wiped

    Returns:
        True when the user exists and the data was wiped, False when the user does not exist
    """
    session = repos.session
    try:
        if not await repos.users.clear_profile_details(user_id):
            await session.rollback()
            return False
        deleted = {
            "study_sessions": await repos.study_sessions.delete_all_for_user(user_id),
            "notes": await repos.notes.delete_all_for_user(user_id),
            "tasks": await repos.tasks.delete_all_for_user(user_id),
            "subjects": await repos.subjects.delete_all_for_user(user_id),
            "preferences": await repos.preferences.delete_all_for_user(user_id),
        }
        await session.commit()
    except SQLAlchemyError:
        await session.rollback()
        logger.error(f"Failed to reset data for user {user_id}; transaction rolled back", exc_info=True)
        raise

    logger.info(f"Reset data for user {user_id}: {deleted}")
    return True
