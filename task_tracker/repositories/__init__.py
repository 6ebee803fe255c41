from task_tracker.repositories.task_repository import TaskRepository

__all__ = ["TaskRepository"]
