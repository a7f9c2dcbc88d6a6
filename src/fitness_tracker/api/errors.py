"""Error translation for the HTTP layer."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from fitness_tracker.domain.models import UserRecord
from fitness_tracker.services.errors import InvalidRecordError, RecordNotFoundError

logger = logging.getLogger(__name__)


@contextmanager
def failure_message(message: str, user: UserRecord) -> Iterator[None]:
    """Log unexpected failures and surface them as a generic 500 error."""
    try:
        yield
    except (InvalidRecordError, RecordNotFoundError):
        raise
    except Exception as exc:
        logger.exception(message, extra={"user_id": str(user.id)})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message
        ) from exc


def register_error_handlers(app: FastAPI) -> None:
    """Render errors as ``{"error": ...}`` JSON bodies."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error(_: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": _format_validation_errors(exc)},
        )

    @app.exception_handler(InvalidRecordError)
    async def invalid_record(_: Request, exc: InvalidRecordError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)}
        )

    @app.exception_handler(RecordNotFoundError)
    async def not_found(_: Request, exc: RecordNotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"error": str(exc)}
        )


def _format_validation_errors(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(
            str(part) for part in error.get("loc", ()) if part not in {"body", "query"}
        )
        text = str(error.get("msg", "Invalid value"))
        messages.append(f"{location}: {text}" if location else text)
    return ", ".join(messages)
