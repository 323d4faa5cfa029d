"""
Subject Endpoints.

CRUD for the courses and topics a user tracks study time against.
"""

from typing import List

from fastapi import APIRouter, HTTPException, status

from unitracker.core.database.entities.subjects import Subject
from unitracker.core.logging_config import get_logger
from unitracker.core.models.io import MessageResponse, SubjectCreate, SubjectRead, SubjectUpdate
from unitracker.server.services.deps import CurrentUserDep, ReposDep

logger = get_logger(__name__)

router = APIRouter(tags=["subjects"])


@router.get("", response_model=List[SubjectRead], summary="List Subjects")
async def list_subjects(user: CurrentUserDep, repos: ReposDep) -> List[SubjectRead]:
    subjects = await repos.subjects.list_for_user(user.id)
    return [SubjectRead.model_validate(subject) for subject in subjects]


@router.post(
    "",
    response_model=SubjectRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Subject",
    description="Create a subject with a `#RRGGBB` color, an icon and a weekly target in hours.",
)
async def create_subject(subject_in: SubjectCreate, user: CurrentUserDep, repos: ReposDep) -> SubjectRead:
    subject = await repos.subjects.create(Subject(user_id=user.id, **subject_in.model_dump()))
    logger.info(f"Created subject {subject.id} ({subject.name}) for user {user.id}")
    return SubjectRead.model_validate(subject)


@router.put(
    "/{subject_id}",
    response_model=SubjectRead,
    summary="Update Subject",
    responses={404: {"description": "Subject not found"}},
)
@router.patch(
    "/{subject_id}",
    response_model=SubjectRead,
    summary="Update Subject",
    responses={404: {"description": "Subject not found"}},
)
async def update_subject(
    subject_id: str, subject_in: SubjectUpdate, user: CurrentUserDep, repos: ReposDep
) -> SubjectRead:
    subject = await repos.subjects.get_for_user(subject_id, user.id)
    if subject is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Subject not found")

    for key, value in subject_in.changes().items():
        setattr(subject, key, value)
    subject = await repos.subjects.update(subject)
    return SubjectRead.model_validate(subject)


@router.delete(
    "/{subject_id}",
    response_model=MessageResponse,
    summary="Delete Subject",
    responses={404: {"description": "Subject not found"}},
)
async def delete_subject(subject_id: str, user: CurrentUserDep, repos: ReposDep) -> MessageResponse:
    if not await repos.subjects.delete_for_user(subject_id, user.id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Subject not found")
    return MessageResponse(message="Subject deleted successfully")
