"""
User preferences repository.

One row per user; writes are upserts keyed on ``user_id``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from unitracker.core.time_utils import utc_now

from ..entities.user_preferences import UserPreferences
from .base import UserScopedRepository, dialect_insert


class UserPreferencesRepository(UserScopedRepository[UserPreferences]):
    """Repository for user preferences using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, UserPreferences)

    def default_order(self):
        return UserPreferences.updated_at.desc()  # type: ignore[attr-defined]

    async def get_by_user(self, user_id: str) -> Optional[UserPreferences]:
        """Get the preferences row for a user.

        Args:
            user_id: User identifier

        Returns:
            UserPreferences instance or None
        """
        stmt = select(UserPreferences).where(UserPreferences.user_id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def upsert(self, user_id: str, values: Dict[str, Any]) -> UserPreferences:
        """Create the user's preferences or overwrite the given fields.

        Fields absent from ``values`` keep their stored value, or the column
        default when the row is new.

        Args:
            user_id: User identifier
            values: Preference fields to write

        Returns:
            The stored preferences
        """
        row = UserPreferences(user_id=user_id, **values).model_dump()
        stmt = dialect_insert(self.session, UserPreferences).values(**row)
        stmt = stmt.on_conflict_do_update(index_elements=["user_id"], set_={**values, "updated_at": utc_now()})
        await self.session.execute(stmt)
        await self.session.commit()

        reload = (
            select(UserPreferences)
            .where(UserPreferences.user_id == user_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(reload)
        return result.scalar_one()
