"""
Task Endpoints.

CRUD for the Kanban board. Moving a card between columns is a partial update
of ``status``; completion bookkeeping is applied by the task entity.
"""

from typing import List

from fastapi import APIRouter, HTTPException, status

from unitracker.core.database.entities.tasks import Task
from unitracker.core.logging_config import get_logger
from unitracker.core.models.io import MessageResponse, TaskCreate, TaskRead, TaskUpdate
from unitracker.server.services.deps import CurrentUserDep, ReposDep

logger = get_logger(__name__)

router = APIRouter(tags=["tasks"])


@router.get(
    "",
    response_model=List[TaskRead],
    summary="List Tasks",
    description="List the acting user's tasks, newest first.",
)
async def list_tasks(user: CurrentUserDep, repos: ReposDep) -> List[TaskRead]:
    tasks = await repos.tasks.list_for_user(user.id)
    return [TaskRead.model_validate(task) for task in tasks]


@router.post(
    "",
    response_model=TaskRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Task",
    description="Create a task. A task created directly in the done column is stamped complete.",
    responses={201: {"description": "Task created successfully"}},
)
async def create_task(task_in: TaskCreate, user: CurrentUserDep, repos: ReposDep) -> TaskRead:
    """
    Create a new task.

    - **title**: Required, non-empty.
    - **status**: `todo`, `in_progress` or `done` (default `todo`).
    - **priority**: `low`, `medium` or `high` (default `medium`).
    - **progress**: 0-100.
    """
    task = Task(user_id=user.id, **task_in.model_dump())
    task.mark_created()
    task = await repos.tasks.create(task)
    logger.info(f"Created task {task.id} for user {user.id}")
    return TaskRead.model_validate(task)


@router.put(
    "/{task_id}",
    response_model=TaskRead,
    summary="Update Task",
    description="Partially update a task. Only the fields sent are changed.",
    responses={404: {"description": "Task not found"}},
)
@router.patch(
    "/{task_id}",
    response_model=TaskRead,
    summary="Update Task",
    description="Partially update a task. Only the fields sent are changed.",
    responses={404: {"description": "Task not found"}},
)
async def update_task(task_id: str, task_in: TaskUpdate, user: CurrentUserDep, repos: ReposDep) -> TaskRead:
    """
    Update a task.

    Moving a task into `done` without `completedAt` stamps the completion time
    and sets progress to 100 unless progress is sent. Moving it out of `done`
    clears the completion time.
    """
    task = await repos.tasks.get_for_user(task_id, user.id)
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")

    task.apply_changes(task_in.changes())
    task = await repos.tasks.update(task)
    return TaskRead.model_validate(task)


@router.delete(
    "/{task_id}",
    response_model=MessageResponse,
    summary="Delete Task",
    responses={404: {"description": "Task not found"}},
)
async def delete_task(task_id: str, user: CurrentUserDep, repos: ReposDep) -> MessageResponse:
    deleted = await repos.tasks.delete_for_user(task_id, user.id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    logger.info(f"Deleted task {task_id} for user {user.id}")
    return MessageResponse(message="Task deleted successfully")
