import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from task_tracker.core.exceptions import InternalError
from task_tracker.models.task import Task, TaskStatus, utcnow

logger = logging.getLogger(__name__)

MUTABLE_FIELDS = ("title", "description", "due_date", "status")


class TaskRepository:
    """Repository for Task model operations.

    Store failures are rolled back, logged and re-raised as `InternalError`.
    """

    def __init__(self, db: Session):
        self._db = db

    def create_task(
        self,
        owner_id: str,
        title: str,
        description: str,
        due_date: datetime,
        status: TaskStatus = TaskStatus.PENDING,
    ) -> Task:
        """Creates a new task in the database."""
        task = Task(
            owner_id=owner_id,
            title=title,
            description=description,
            due_date=due_date,
            status=status,
        )
        try:
            self._db.add(task)
            self._db.commit()
            self._db.refresh(task)
        except SQLAlchemyError as e:
            self._db.rollback()
            logger.exception(f"Error creating task for owner {owner_id}: {e}")
            raise InternalError()
        logger.info(f"Successfully created task: {task.id}")
        return task

    def get_task_by_id(self, task_id: str) -> Optional[Task]:
        """Retrieves a task by its ID regardless of owner."""
        try:
            return self._db.query(Task).filter(Task.id == task_id).first()
        except SQLAlchemyError as e:
            logger.exception(f"Error getting task by ID {task_id}: {e}")
            raise InternalError()

    def get_owned_task(self, task_id: str, owner_id: str) -> Optional[Task]:
        """Retrieves a task by ID only if it belongs to `owner_id`."""
        try:
            return self._db.query(Task).filter(Task.id == task_id, Task.owner_id == owner_id).first()
        except SQLAlchemyError as e:
            logger.exception(f"Error getting task {task_id} for owner {owner_id}: {e}")
            raise InternalError()

    def find_tasks_by_owner(self, owner_id: str, status: Optional[TaskStatus] = None) -> List[Task]:
        """Finds all tasks of an owner, optionally restricted to one status."""
        try:
            query = self._db.query(Task).filter(Task.owner_id == owner_id)
            if status is not None:
                query = query.filter(Task.status == status)
            return query.all()
        except SQLAlchemyError as e:
            logger.exception(f"Error finding tasks for owner {owner_id} (status={status}): {e}")
            raise InternalError()

    def update_owned_task(self, task_id: str, owner_id: str, update_data: Dict[str, Any]) -> Optional[Task]:
        """Updates the mutable fields of a task matched on both id and owner.

        Returns None when no row matched, e.g. the task was deleted after the
        caller looked it up.
        """
        values = {key: value for key, value in update_data.items() if key in MUTABLE_FIELDS}
        values["updated_at"] = utcnow()
        try:
            matched = (
                self._db.query(Task)
                .filter(Task.id == task_id, Task.owner_id == owner_id)
                .update(values, synchronize_session=False)
            )
            self._db.commit()
        except SQLAlchemyError as e:
            self._db.rollback()
            logger.exception(f"Error updating task {task_id}: {e}")
            raise InternalError()

        if not matched:
            logger.warning(f"Update of task {task_id} matched no row for owner {owner_id}")
            return None
        logger.info(f"Successfully updated task: {task_id}")
        return self.get_owned_task(task_id, owner_id)

    def delete_owned_task(self, task_id: str, owner_id: str) -> bool:
        """Deletes a task matched on both id and owner. Returns False if nothing matched."""
        try:
            deleted = (
                self._db.query(Task)
                .filter(Task.id == task_id, Task.owner_id == owner_id)
                .delete(synchronize_session=False)
            )
            self._db.commit()
        except SQLAlchemyError as e:
            self._db.rollback()
            logger.exception(f"Error deleting task {task_id}: {e}")
            raise InternalError()

        if not deleted:
            logger.warning(f"Delete of task {task_id} matched no row for owner {owner_id}")
            return False
        logger.info(f"Successfully deleted task: {task_id}")
        return True
