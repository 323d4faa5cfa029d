"""
Note Endpoints.

CRUD for the user's notes. Tags may be sent as a list or as one
comma-separated string.
"""

from typing import List

from fastapi import APIRouter, HTTPException, status

from unitracker.core.database.entities.notes import Note
from unitracker.core.logging_config import get_logger
from unitracker.core.models.io import MessageResponse, NoteCreate, NoteRead, NoteUpdate
from unitracker.server.services.deps import CurrentUserDep, ReposDep

logger = get_logger(__name__)

router = APIRouter(tags=["notes"])


@router.get(
    "",
    response_model=List[NoteRead],
    summary="List Notes",
    description="List the acting user's notes, most recently updated first.",
)
async def list_notes(user: CurrentUserDep, repos: ReposDep) -> List[NoteRead]:
    notes = await repos.notes.list_for_user(user.id)
    return [NoteRead.model_validate(note) for note in notes]


@router.post(
    "",
    response_model=NoteRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Note",
)
async def create_note(note_in: NoteCreate, user: CurrentUserDep, repos: ReposDep) -> NoteRead:
    note = await repos.notes.create(Note(user_id=user.id, **note_in.model_dump()))
    logger.info(f"Created note {note.id} for user {user.id}")
    return NoteRead.model_validate(note)


@router.put(
    "/{note_id}",
    response_model=NoteRead,
    summary="Update Note",
    description="Partially update a note. Only the fields sent are changed.",
    responses={404: {"description": "Note not found"}},
)
@router.patch(
    "/{note_id}",
    response_model=NoteRead,
    summary="Update Note",
    description="Partially update a note. Only the fields sent are changed.",
    responses={404: {"description": "Note not found"}},
)
async def update_note(note_id: str, note_in: NoteUpdate, user: CurrentUserDep, repos: ReposDep) -> NoteRead:
    note = await repos.notes.get_for_user(note_id, user.id)
    if note is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Note not found")

    for key, value in note_in.changes().items():
        setattr(note, key, value)
    note = await repos.notes.update(note)
    return NoteRead.model_validate(note)


@router.delete(
    "/{note_id}",
    response_model=MessageResponse,
    summary="Delete Note",
    responses={404: {"description": "Note not found"}},
)
async def delete_note(note_id: str, user: CurrentUserDep, repos: ReposDep) -> MessageResponse:
    if not await repos.notes.delete_for_user(note_id, user.id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Note not found")
    logger.info(f"Deleted note {note_id} for user {user.id}")
    return MessageResponse(message="Note deleted successfully")
