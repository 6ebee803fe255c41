import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from task_tracker import __version__
from task_tracker.api.health import router as health_router
from task_tracker.api.task_endpoints import router as tasks_router
from task_tracker.config.database import init_db
from task_tracker.config.settings import settings
from task_tracker.core.error_handlers import add_exception_handlers
from task_tracker.core.log_sanitizer import configure_secure_logging
from task_tracker.middleware.request_logging import RequestLoggingMiddleware

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

if settings.ENABLE_SECURE_LOGGING:
    configure_secure_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        init_db()
    except Exception as e:
        logger.error(f"Error during startup: {e}")
        raise
    yield


# Create FastAPI app
app = FastAPI(
    title="Task Tracker API",
    description="Personal task tracking: create, list, filter, update and delete your own tasks",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(RequestLoggingMiddleware)

# Include routers
app.include_router(health_router)
app.include_router(tasks_router)

# Register custom exception handlers
add_exception_handlers(app)


# Root endpoint
@app.get("/")
def read_root():
    """Root endpoint with API information."""
    return {
        "name": "Task Tracker API",
        "version": app.version,
        "docs_url": "/docs",
        "health_check": "/health",
    }


def run():
    uvicorn.run("task_tracker.main:app", host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    run()
