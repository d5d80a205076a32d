"""
handlers/errors.py
------------------
Maps the internal error taxonomy onto HTTP status codes.
This is the only place that decides what a failure looks like to a client:
responses carry a status code and no body.
"""

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError

from utils.errors import MalformedInputError, NotFoundError, ServiceError, StorageError
from utils.logger import get_logger

logger = get_logger(__name__)

# Checked in order; the first matching class wins.
_STATUS_BY_ERROR: list[tuple[type[Exception], int]] = [
    (MalformedInputError, 400),
    (RequestValidationError, 400),
    (NotFoundError, 404),
    (StorageError, 500),
]


def status_for(exc: Exception) -> int:
    """Return the HTTP status for an exception; unknown errors are 500."""
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status
    return 500


async def _service_error(request: Request, exc: ServiceError) -> Response:
    status = status_for(exc)
    if status >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc!r}")
    else:
        logger.info(f"{request.method} {request.url.path} -> {status}: {exc}")
    return Response(status_code=status)


async def _validation_error(request: Request, exc: RequestValidationError) -> Response:
    logger.info(f"{request.method} {request.url.path} -> 400: unparseable request body")
    return Response(status_code=status_for(exc))


async def _unexpected_error(request: Request, exc: Exception) -> Response:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return Response(status_code=500)


def register_error_handlers(app: FastAPI) -> None:
    """Install the exception handlers on a FastAPI app."""
    app.add_exception_handler(ServiceError, _service_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(Exception, _unexpected_error)
