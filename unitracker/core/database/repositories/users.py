"""
User repository.

Data access for the account row: lookup, upsert of the stubbed demo account,
profile edits and the profile reset used when a user wipes their data.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import update as sa_update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from unitracker.core.time_utils import utc_now

from ..entities.users import User
from .base import AsyncBaseRepository, QueryBuilder, dialect_insert

PROFILE_FIELDS = frozenset({"first_name", "last_name", "major", "hobbies", "profile_image_url"})


class UserRepository(AsyncBaseRepository[User]):
    """Repository for user data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, User)

    async def create(self, user: User) -> User:
        self.session.add(user)
        await self.session.commit()
        await self.session.refresh(user)
        return user

    async def get_by_id(self, user_id: str) -> Optional[User]:
        stmt = select(User).where(User.id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, user: User) -> User:
        user.updated_at = utc_now()
        self.session.add(user)
        await self.session.commit()
        await self.session.refresh(user)
        return user

    async def delete(self, user_id: str) -> bool:
        user = await self.get_by_id(user_id)
        if user is None:
            return False
        await self.session.delete(user)
        await self.session.commit()
        return True

    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[User]:
        stmt = select(User).order_by(User.created_at)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, User, filters)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def upsert(self, user_id: str, values: Dict[str, Any]) -> User:
        """Insert the user, or overwrite the given fields if the ID already exists.

        Args:
            user_id: User identifier
            values: Column values to write

        Returns:
            The stored user
        """
        row = User(id=user_id, **values).model_dump()
        stmt = dialect_insert(self.session, User).values(**row)
        stmt = stmt.on_conflict_do_update(index_elements=["id"], set_={**values, "updated_at": utc_now()})
        await self.session.execute(stmt)
        await self.session.commit()
        return await self._reload(user_id)

    async def get_or_create(self, user: User) -> Tuple[User, bool]:
        """Return the stored row for ``user.id``, inserting ``user`` if there is none.

        An existing row is never overwritten. Concurrent callers racing on the
        same ID all get the one stored row.

        Returns:
            The stored user and whether this call inserted it
        """
        existing = await self.get_by_id(user.id)
        if existing is not None:
            return existing, False

        stmt = dialect_insert(self.session, User).values(**user.model_dump())
        result = await self.session.execute(stmt.on_conflict_do_nothing(index_elements=["id"]))
        await self.session.commit()
        return await self._reload(user.id), bool(result.rowcount)

    async def _reload(self, user_id: str) -> User:
        stmt = select(User).where(User.id == user_id).execution_options(populate_existing=True)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def update_profile(self, user_id: str, changes: Dict[str, Any]) -> Optional[User]:
        """Apply profile edits. Only profile fields are written; anything else is ignored.

        Args:
            user_id: User identifier
            changes: Profile fields sent by the client

        Returns:
            The updated user, or None if the user does not exist
        """
        user = await self.get_by_id(user_id)
        if user is None:
            return None
        for key, value in changes.items():
            if key in PROFILE_FIELDS:
                setattr(user, key, value)
        return await self.update(user)

    async def clear_profile_details(self, user_id: str) -> bool:
        """Null ``major`` and ``hobbies`` without committing. The account itself stays.

        Returns:
            True if the user row exists
        """
        stmt = (
            sa_update(User)
            .where(User.id == user_id)  # type: ignore[arg-type]
            .values(major=None, hobbies=None, updated_at=utc_now())
        )
        result = await self.session.execute(stmt)
        return bool(result.rowcount)
