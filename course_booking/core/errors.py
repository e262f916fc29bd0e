"""
API error taxonomy and the handlers that render it.

Every error carries the status code it maps to. Raised with a message the
response body is ``{"message": ...}``; raised without one the body is the
bare ``false`` that older clients of this API still expect.
"""
import logging
from contextlib import contextmanager
from typing import Any

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class APIError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str | None = None, *, content: Any = None):
        super().__init__(message)
        self.message = message
        if content is not None:
            self.content = content
        elif message is not None:
            self.content = {"message": message}
        else:
            self.content = False


class InvalidInput(APIError):
    status_code = status.HTTP_400_BAD_REQUEST


class Unauthorized(APIError):
    status_code = status.HTTP_401_UNAUTHORIZED


class Forbidden(APIError):
    status_code = status.HTTP_403_FORBIDDEN


class NotFound(APIError):
    status_code = status.HTTP_404_NOT_FOUND


class Conflict(APIError):
    status_code = status.HTTP_409_CONFLICT


class InternalError(APIError):
    pass


@contextmanager
def persistence_errors(db: Session, message: str = "Internal server error"):
    """Roll back and re-raise any store failure as an InternalError carrying ``message``."""
    try:
        yield
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Persistence call failed (%s)", message)
        raise InternalError(message) from exc


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.content)


async def persistence_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(
        "Persistence failure on %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def invalid_body(errors: list) -> InvalidInput:
    return InvalidInput(
        content={
            "message": "Invalid request body",
            "errors": jsonable_encoder(errors),
        }
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = invalid_body(exc.errors())
    return JSONResponse(status_code=error.status_code, content=error.content)


def register_error_handlers(app) -> None:
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(SQLAlchemyError, persistence_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
