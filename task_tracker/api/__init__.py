from task_tracker.api.health import router as health_router
from task_tracker.api.task_endpoints import router as tasks_router

__all__ = ["health_router", "tasks_router"]
