"""
Health check endpoints.
"""

import logging
import time
from datetime import datetime

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from task_tracker import __version__
from task_tracker.config.database import get_db, ping

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health_check():
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "version": __version__,
    }


@router.get("/db")
def database_health(db: Session = Depends(get_db)):
    """Check store connectivity."""
    start_time = time.time()
    try:
        ping(db)
    except SQLAlchemyError as e:
        duration = time.time() - start_time
        logger.error(f"Database health check failed: {e}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "unhealthy",
                "response_time_ms": round(duration * 1000, 2),
                "details": "Database connection failed",
            },
        )

    duration = time.time() - start_time
    return {
        "status": "healthy",
        "response_time_ms": round(duration * 1000, 2),
        "details": "Database connection successful",
    }
