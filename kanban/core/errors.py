# kanban/core/errors.py
"""
Error taxonomy shared by the services and the HTTP layer.

Services raise these; ``register_exception_handlers`` maps them onto status
codes with a ``{"detail": ...}`` body, the same shape FastAPI uses for
``HTTPException``.
"""
import functools
import logging

import pydantic
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class KanbanError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(KanbanError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(KanbanError):
    status_code = status.HTTP_404_NOT_FOUND


class StorageError(KanbanError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class StartupError(KanbanError):
    """Raised when the database cannot be reached or bootstrapped at startup."""


def translate_storage_errors(func):
    """Turn driver errors and malformed rows into ``StorageError``.

    The wrapped service must take the session as its first argument; it is
    rolled back before the error propagates.
    """

    @functools.wraps(func)
    def wrapper(db, *args, **kwargs):
        try:
            return func(db, *args, **kwargs)
        except (SQLAlchemyError, pydantic.ValidationError) as exc:
            db.rollback()
            logger.exception("Storage failure in %s", func.__name__)
            raise StorageError(f"{func.__name__} failed") from exc

    return wrapper


def _first_error_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    err = errors[0]
    # drop the leading "body"/"query"/"path" segment
    loc = [str(part) for part in err.get("loc", ())[1:]]
    msg = err.get("msg", "Invalid value")
    return f"{'.'.join(loc)}: {msg}" if loc else msg


async def kanban_error_handler(request: Request, exc: KanbanError) -> JSONResponse:
    if exc.status_code >= 500:
        return JSONResponse(status_code=exc.status_code, content={"detail": "Internal server error"})
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return await kanban_error_handler(request, ValidationError(_first_error_message(exc)))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(KanbanError, kanban_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


__all__ = [
    "KanbanError",
    "ValidationError",
    "NotFoundError",
    "StorageError",
    "StartupError",
    "translate_storage_errors",
    "register_exception_handlers",
]
