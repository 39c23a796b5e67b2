"""
Request outcome errors and their HTTP mapping.

Services raise `QAError` subclasses; the handlers registered here turn them
into `{"message": ...}` JSON bodies. Raw driver errors never reach clients.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from . import db

logger = logging.getLogger(__name__)

INVALID_REQUEST_MESSAGE = "Invalid request data."
INTERNAL_ERROR_MESSAGE = "An unexpected error occurred."


class QAError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidRequest(QAError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFound(QAError):
    status_code = status.HTTP_404_NOT_FOUND


class PersistenceError(QAError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


@contextmanager
def persistence_errors(message: str) -> Iterator[None]:
    """
    Translate `db.DatabaseError` raised inside the block into `PersistenceError(message)`.
    """
    try:
        yield
    except db.DatabaseError as exc:
        logger.exception("persistence_failed message=%r", message)
        raise PersistenceError(message) from exc


def _message_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(QAError)
    async def qa_error_handler(request: Request, exc: QAError) -> JSONResponse:
        if isinstance(exc, InvalidRequest):
            logger.debug("invalid_request path=%s message=%r", request.url.path, exc.message)
        return _message_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Malformed JSON bodies and non-integer path ids land here.
        logger.debug("request_validation_failed path=%s errors=%s", request.url.path, exc.errors())
        return _message_response(status.HTTP_400_BAD_REQUEST, INVALID_REQUEST_MESSAGE)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("unhandled_error path=%s", request.url.path, exc_info=exc)
        return _message_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)
