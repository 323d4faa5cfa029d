"""
Note repository.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.notes import Note
from .base import UserScopedRepository


class NoteRepository(UserScopedRepository[Note]):
    """Repository for notes. Lists put the most recently edited note first."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Note)

    def default_order(self):
        return Note.updated_at.desc()  # type: ignore[attr-defined]
