import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, Query

from task_tracker.auth import CurrentUser, get_current_user
from task_tracker.dependencies import get_task_service
from task_tracker.schemas.task import (
    MessageEnvelope,
    TaskEnvelope,
    TaskListEnvelope,
    TaskPayload,
    TaskRead,
)
from task_tracker.services.task_service import TaskService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


def _filtered_response(tasks) -> TaskListEnvelope:
    msg = "Filtered tasks found successfully.." if tasks else "No tasks found with the specified status"
    return TaskListEnvelope(tasks=[TaskRead.model_validate(task) for task in tasks], msg=msg)


@router.get("", response_model=TaskListEnvelope)
def list_tasks(
    status: Optional[str] = Query(None, description="Restrict to one status"),
    task_service: TaskService = Depends(get_task_service),
    current_user: CurrentUser = Depends(get_current_user),
):
    """
    List the caller's tasks, optionally filtered by status.
    """
    if status is not None:
        return _filtered_response(task_service.list_filtered_tasks(current_user.id, status))

    tasks = task_service.list_tasks(current_user.id)
    return TaskListEnvelope(
        tasks=[TaskRead.model_validate(task) for task in tasks],
        msg="Tasks found successfully..",
    )


# Declared before /{task_id} so "filter" is not taken for an id
@router.get("/filter", response_model=TaskListEnvelope)
def list_filtered_tasks(
    status: Optional[str] = Query(None, description="Pending, In Progress or Completed"),
    task_service: TaskService = Depends(get_task_service),
    current_user: CurrentUser = Depends(get_current_user),
):
    """
    List the caller's tasks with the given status. `status` is required.
    """
    return _filtered_response(task_service.list_filtered_tasks(current_user.id, status))


@router.get("/{task_id}", response_model=TaskEnvelope)
def get_task(
    task_id: str,
    task_service: TaskService = Depends(get_task_service),
    current_user: CurrentUser = Depends(get_current_user),
):
    """
    Get one of the caller's tasks. Tasks of other users are reported as not found.
    """
    task = task_service.get_task(current_user.id, task_id)
    return TaskEnvelope(task=TaskRead.model_validate(task), msg="Task found successfully..")


@router.post("", response_model=TaskEnvelope)
def create_task(
    payload: TaskPayload = Body(...),
    task_service: TaskService = Depends(get_task_service),
    current_user: CurrentUser = Depends(get_current_user),
):
    """
    Create a task owned by the caller. Status defaults to Pending.
    """
    task = task_service.create_task(
        current_user.id,
        title=payload.title,
        description=payload.description,
        due_date=payload.due_date,
        status=payload.status,
    )
    logger.info(f"Task {task.id} created by user {current_user.id}")
    return TaskEnvelope(task=TaskRead.model_validate(task), msg="Task created successfully..")


@router.put("/{task_id}", response_model=TaskEnvelope)
def update_task(
    task_id: str,
    payload: TaskPayload = Body(...),
    task_service: TaskService = Depends(get_task_service),
    current_user: CurrentUser = Depends(get_current_user),
):
    """
    Replace title, description, due date and status of one of the caller's tasks.
    """
    logger.info(f"User {current_user.id} attempting to update task {task_id}")
    task = task_service.update_task(
        current_user.id,
        task_id,
        title=payload.title,
        description=payload.description,
        due_date=payload.due_date,
        status=payload.status,
    )
    return TaskEnvelope(task=TaskRead.model_validate(task), msg="Task updated successfully..")


@router.delete("/{task_id}", response_model=MessageEnvelope)
def delete_task(
    task_id: str,
    task_service: TaskService = Depends(get_task_service),
    current_user: CurrentUser = Depends(get_current_user),
):
    """
    Delete one of the caller's tasks.
    """
    logger.info(f"User {current_user.id} attempting to delete task {task_id}")
    task_service.delete_task(current_user.id, task_id)
    logger.info(f"Task {task_id} deleted successfully by user {current_user.id}")
    return MessageEnvelope(msg="Task deleted successfully..")
