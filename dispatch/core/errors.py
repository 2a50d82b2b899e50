"""
Error taxonomy for the dispatch API and the FastAPI handlers that render it.

Every failure leaves the API as a JSON body with a single ``message`` field.
"""
import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class DispatchError(Exception):
    """Base class for errors that map onto an HTTP response."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DispatchError):
    """Raised when a required field is missing or invalid."""
    status_code = status.HTTP_400_BAD_REQUEST


class AuthError(DispatchError):
    """Raised when credentials do not match a driver."""
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(DispatchError):
    """Raised when no row matches the requested identity."""
    status_code = status.HTTP_404_NOT_FOUND


class DataAccessError(DispatchError):
    """Raised when a query fails. Carries a context label only."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, context: str):
        super().__init__(f"{context} failed")
        self.context = context


@contextmanager
def data_access(db: Session, context: str) -> Iterator[None]:
    """Turn any SQLAlchemy failure inside the block into a DataAccessError.

    The session is rolled back so the request-scoped session stays usable,
    and the original exception is logged but never sent to the client.

    Args:
        db: Session the block is working with
        context: Short label of the operation, e.g. "Creating bill"
    """
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"{context} error: {str(e)}")
        raise DataAccessError(context) from e


async def dispatch_error_handler(request: Request, exc: DispatchError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "message": "Invalid request",
            "errors": jsonable_encoder(
                [{k: v for k, v in error.items() if k not in ("input", "ctx")} for error in exc.errors()]
            ),
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error handlers to the application."""
    app.add_exception_handler(DispatchError, dispatch_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
