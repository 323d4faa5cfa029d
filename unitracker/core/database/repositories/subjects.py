"""
Subject repository.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.subjects import Subject
from .base import UserScopedRepository


class SubjectRepository(UserScopedRepository[Subject]):
    """Repository for subjects. Lists put the newest subject first."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Subject)
