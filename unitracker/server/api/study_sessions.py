"""
Study Session Endpoints.

Sessions are recorded by the client timers: created when a timer starts and
updated when it stops. There is no delete endpoint; sessions are only
removed by a data reset.
"""

from datetime import datetime
from typing import Annotated, List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from unitracker.core.database.entities.study_sessions import StudySession
from unitracker.core.logging_config import get_logger
from unitracker.core.models.io import StudySessionCreate, StudySessionRead, StudySessionUpdate
from unitracker.core.time_utils import to_naive_utc
from unitracker.server.services.deps import CurrentUserDep, ReposDep

logger = get_logger(__name__)

router = APIRouter(tags=["study-sessions"])


@router.get(
    "",
    response_model=List[StudySessionRead],
    summary="List Study Sessions",
    description="List the acting user's sessions, most recently started first, optionally bounded by start time.",
)
async def list_study_sessions(
    user: CurrentUserDep,
    repos: ReposDep,
    start_date: Annotated[Optional[datetime], Query(alias="startDate")] = None,
    end_date: Annotated[Optional[datetime], Query(alias="endDate")] = None,
) -> List[StudySessionRead]:
    """
    List study sessions.

    - **startDate**: Only sessions starting at or after this instant.
    - **endDate**: Only sessions starting at or before this instant.

    Either bound may be sent on its own.
    """
    sessions = await repos.study_sessions.list_between(
        user.id, start=to_naive_utc(start_date), end=to_naive_utc(end_date)
    )
    return [StudySessionRead.model_validate(s) for s in sessions]


@router.get(
    "/active",
    response_model=Optional[StudySessionRead],
    summary="Get Active Study Session",
    description="The most recently started session that has not ended. `null` when there is none.",
)
async def get_active_study_session(user: CurrentUserDep, repos: ReposDep) -> Optional[StudySessionRead]:
    active = await repos.study_sessions.get_active(user.id)
    if active is None:
        return None
    return StudySessionRead.model_validate(active)


@router.post(
    "",
    response_model=StudySessionRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Study Session",
    responses={400: {"description": "Session ends before it starts"}},
)
async def create_study_session(
    session_in: StudySessionCreate, user: CurrentUserDep, repos: ReposDep
) -> StudySessionRead:
    """
    Record a study session.

    `startTime` defaults to now. A session sent with `endTime` but no
    `duration` gets its duration in whole minutes from the two times.
    """
    values = session_in.model_dump(exclude_none=True)
    study_session = StudySession(user_id=user.id, **values)
    study_session.check_times()
    if "duration" not in values:
        study_session.fill_duration()

    study_session = await repos.study_sessions.create(study_session)
    logger.info(f"Started {study_session.type.value} session {study_session.id} for user {user.id}")
    return StudySessionRead.model_validate(study_session)


@router.put(
    "/{session_id}",
    response_model=StudySessionRead,
    summary="Update Study Session",
    description="Partially update a session, typically to stop it. `duration` is derived when only `endTime` is sent.",
    responses={
        400: {"description": "Session ends before it starts"},
        404: {"description": "Study session not found"},
    },
)
@router.patch(
    "/{session_id}",
    response_model=StudySessionRead,
    summary="Update Study Session",
    description="Partially update a session, typically to stop it. `duration` is derived when only `endTime` is sent.",
    responses={
        400: {"description": "Session ends before it starts"},
        404: {"description": "Study session not found"},
    },
)
async def update_study_session(
    session_id: str, session_in: StudySessionUpdate, user: CurrentUserDep, repos: ReposDep
) -> StudySessionRead:
    study_session = await repos.study_sessions.get_for_user(session_id, user.id)
    if study_session is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Study session not found")

    study_session.apply_changes(session_in.changes())
    study_session = await repos.study_sessions.update(study_session)
    return StudySessionRead.model_validate(study_session)
