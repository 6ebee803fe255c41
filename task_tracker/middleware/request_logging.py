import logging
import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path, status and latency of every request.

    Holds no per-process counters; each request is handled independently.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.time()
        path = request.url.path
        method = request.method

        try:
            response = await call_next(request)
        except Exception as e:
            duration = time.time() - start_time
            logger.error(f"Request failed: {method} {path} - Error: {str(e)} - Duration: {duration:.4f}s")
            raise

        duration = time.time() - start_time
        response.headers["X-Process-Time"] = str(duration)
        logger.info(f"Request: {method} {path} - Status: {response.status_code} - Duration: {duration:.4f}s")
        return response
