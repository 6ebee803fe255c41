from fastapi import Depends
from sqlalchemy.orm import Session

from task_tracker.auth.dependencies import get_current_user
from task_tracker.config.database import get_db
from task_tracker.config.settings import settings
from task_tracker.repositories.task_repository import TaskRepository
from task_tracker.services.task_service import TaskService


def get_task_repository(db: Session = Depends(get_db)) -> TaskRepository:
    """Dependency to provide a TaskRepository bound to the request's session."""
    return TaskRepository(db)


def get_task_service(task_repo: TaskRepository = Depends(get_task_repository)) -> TaskService:
    """Dependency to provide a TaskService."""
    return TaskService(task_repo, hide_foreign_tasks=settings.HIDE_FOREIGN_TASKS)


__all__ = [
    "get_current_user",
    "get_task_repository",
    "get_task_service",
]
