"""
Study session repository.

This module provides data access for timer sessions: date-range listing,
lookup of the session that is still running, and the plain CRUD operations.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.study_sessions import StudySession
from .base import UserScopedRepository


class StudySessionRepository(UserScopedRepository[StudySession]):
    """Repository for study session data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, StudySession)

    def default_order(self):
        return StudySession.start_time.desc()  # type: ignore[attr-defined]

    async def list_between(
        self,
        user_id: str,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[StudySession]:
        """List a user's sessions whose start time falls inside the given bounds.

        Each bound is optional and inclusive.

        Args:
            user_id: Owner of the sessions
            start: Earliest start time (naive UTC)
            end: Latest start time (naive UTC)

        Returns:
            Sessions, most recently started first
        """
        stmt = select(StudySession).where(StudySession.user_id == user_id)
        if start is not None:
            stmt = stmt.where(StudySession.start_time >= start)
        if end is not None:
            stmt = stmt.where(StudySession.start_time <= end)
        stmt = stmt.order_by(self.default_order())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_active(self, user_id: str) -> Optional[StudySession]:
        """The most recently started session that has neither ended nor completed."""
        stmt = (
            select(StudySession)
            .where(
                (StudySession.user_id == user_id)
                & (StudySession.end_time.is_(None))  # type: ignore[union-attr]
                & (StudySession.completed == False)  # noqa: E712
            )
            .order_by(self.default_order())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()
