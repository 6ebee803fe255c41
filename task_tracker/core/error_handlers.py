import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .exceptions import AppExceptionBase, InternalError

logger = logging.getLogger(__name__)


def error_body(message: str, code: str) -> dict:
    return {"status": False, "msg": message, "code": code}


async def app_exception_handler(request: Request, exc: AppExceptionBase):
    if exc.status_code >= 500:
        logger.error(f"Application error on {request.method} {request.url.path}: {exc.message}", exc_info=True)
    else:
        logger.info(f"Request rejected on {request.method} {request.url.path}: {exc.code} - {exc.message}")
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == status.HTTP_401_UNAUTHORIZED else None
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.message, exc.code),
        headers=headers,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    logger.warning(f"HTTP error: {exc.status_code} {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail), "HTTP_EXCEPTION"),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Validation error: {exc.errors()}")
    error_messages = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"])
        message = error["msg"]
        error_messages.append(f"Field '{field}': {message}")

    body = error_body("Input validation failed.", "VALIDATION_ERROR")
    body["details"] = error_messages
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body)


async def generic_exception_handler(request: Request, exc: Exception):
    logger.critical(f"Unhandled exception: {str(exc)}", exc_info=True)
    fallback = InternalError()
    return JSONResponse(
        status_code=fallback.status_code,
        content=error_body(fallback.message, fallback.code),
    )


def add_exception_handlers(app: FastAPI):
    app.add_exception_handler(AppExceptionBase, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
