import logging
from datetime import datetime, timezone
from typing import Any, List, Optional
from uuid import UUID

from task_tracker.core.exceptions import ForbiddenError, NotFoundError, ValidationError
from task_tracker.models.task import Task, TaskStatus
from task_tracker.repositories.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class TaskService:
    """
    Create, read, filter, update and delete tasks on behalf of one caller.

    Every operation takes the authenticated caller's id as its first argument.
    Inputs are validated before the store is touched.

    Ownership: `get_task` hides tasks of other owners behind a not-found.
    `update_task` and `delete_task` check existence store-wide first and then
    refuse foreign tasks with `ForbiddenError`, unless `hide_foreign_tasks` is
    set, in which case they report not-found like `get_task`.
    """

    def __init__(self, repository: TaskRepository, hide_foreign_tasks: bool = False):
        self.repository = repository
        self.hide_foreign_tasks = hide_foreign_tasks

    def list_tasks(self, owner_id: str) -> List[Task]:
        tasks = self.repository.find_tasks_by_owner(owner_id)
        logger.info(f"Found {len(tasks)} tasks for user {owner_id}")
        return tasks

    def list_filtered_tasks(self, owner_id: str, status: Any) -> List[Task]:
        if status is None or (isinstance(status, str) and not status.strip()):
            raise ValidationError("Status query parameter is required")
        status_enum = _parse_status(status)

        tasks = self.repository.find_tasks_by_owner(owner_id, status=status_enum)
        logger.info(f"Found {len(tasks)} tasks with status {status_enum.value} for user {owner_id}")
        return tasks

    def get_task(self, owner_id: str, task_id: str) -> Task:
        task_id = _validate_task_id(task_id)
        task = self.repository.get_owned_task(task_id, owner_id)
        if task is None:
            raise NotFoundError("No task found..")
        return task

    def create_task(
        self,
        owner_id: str,
        title: Optional[str],
        description: Optional[str],
        due_date: Optional[datetime],
        status: Any = None,
    ) -> Task:
        title = _clean_text(title)
        description = _clean_text(description)
        if not title or not description or due_date is None:
            raise ValidationError("Title, description, and due date are required")
        status_enum = TaskStatus.PENDING if status is None else _parse_status(status)
        due_date = _as_utc(due_date)

        logger.info(f"User {owner_id} creating task: {title[:50]}")
        return self.repository.create_task(
            owner_id=owner_id,
            title=title,
            description=description,
            due_date=due_date,
            status=status_enum,
        )

    def update_task(
        self,
        owner_id: str,
        task_id: str,
        title: Optional[str],
        description: Optional[str],
        due_date: Optional[datetime],
        status: Any,
    ) -> Task:
        title = _clean_text(title)
        description = _clean_text(description)
        if not title or not description or due_date is None or status is None:
            raise ValidationError("Title, description, due date, and status are required")
        status_enum = _parse_status(status)
        due_date = _as_utc(due_date)
        task_id = _validate_task_id(task_id)

        self._check_ownership(owner_id, task_id, "You can't update task of another user")

        updated = self.repository.update_owned_task(
            task_id,
            owner_id,
            {
                "title": title,
                "description": description,
                "due_date": due_date,
                "status": status_enum,
            },
        )
        if updated is None:
            raise NotFoundError("Task with given id not found")
        return updated

    def delete_task(self, owner_id: str, task_id: str) -> None:
        task_id = _validate_task_id(task_id)

        self._check_ownership(owner_id, task_id, "You can't delete task of another user")

        if not self.repository.delete_owned_task(task_id, owner_id):
            raise NotFoundError("Task with given id not found")

    def _check_ownership(self, owner_id: str, task_id: str, forbidden_message: str) -> None:
        """Existence first (store-wide), then ownership."""
        task = self.repository.get_task_by_id(task_id)
        if task is None:
            raise NotFoundError("Task with given id not found")
        if task.owner_id != owner_id:
            logger.warning(f"User {owner_id} attempted to modify task {task_id} of another user")
            if self.hide_foreign_tasks:
                raise NotFoundError("Task with given id not found")
            raise ForbiddenError(forbidden_message)


def _validate_task_id(task_id: Any) -> str:
    try:
        return str(UUID(str(task_id)))
    except (TypeError, ValueError):
        raise ValidationError("Task id not valid")


def _parse_status(status: Any) -> TaskStatus:
    try:
        return TaskStatus.parse(status)
    except ValueError:
        raise ValidationError(f"Invalid status: {status}")


def _clean_text(value: Optional[str]) -> Optional[str]:
    return value.strip() if isinstance(value, str) else value


def _as_utc(value: datetime) -> datetime:
    # Naive datetimes are taken to be UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    try:
        return value.astimezone(timezone.utc)
    except OverflowError:
        raise ValidationError("Due date not valid")
