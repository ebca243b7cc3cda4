"""Failure kinds raised by the facades and their HTTP translation.

Facades raise the exceptions below for expected conditions. The web layer
installs ``register_error_handlers`` so each kind surfaces with its own status
code; anything else propagates as a genuine fault.
"""

from enum import Enum

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ValidationError

logger = structlog.get_logger(__name__)


class ErrorKind(Enum):
    INVALID_ARGUMENT = "invalid_argument"
    UNAUTHENTICATED = "unauthenticated"
    NOT_FOUND = "not_found"
    OPERATION_NOT_ALLOWED = "operation_not_allowed"
    SERVICE_RUNTIME = "service_runtime"
    SERVICE_UNAVAILABLE = "service_unavailable"


HTTP_STATUS = {
    ErrorKind.INVALID_ARGUMENT: 400,
    ErrorKind.UNAUTHENTICATED: 401,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.OPERATION_NOT_ALLOWED: 409,
    ErrorKind.SERVICE_RUNTIME: 500,
    ErrorKind.SERVICE_UNAVAILABLE: 503,
}


class StorefrontError(Exception):
    kind: ErrorKind = ErrorKind.SERVICE_RUNTIME

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgumentError(StorefrontError):
    """A required argument was missing. Raised before any work is done."""

    kind = ErrorKind.INVALID_ARGUMENT


class ResourceNotFoundError(StorefrontError):
    kind = ErrorKind.NOT_FOUND


class OperationNotAllowedError(StorefrontError):
    kind = ErrorKind.OPERATION_NOT_ALLOWED


class ServiceRuntimeError(StorefrontError):
    """A downstream service failed. The underlying exception is kept as ``__cause__``."""

    kind = ErrorKind.SERVICE_RUNTIME


def require(value, message: str) -> None:
    if value is None:
        raise InvalidArgumentError(message)


def error_body(kind: ErrorKind, message: str) -> dict:
    return {"error": kind.value, "message": message}


def error_response(kind: ErrorKind, message: str) -> JSONResponse:
    return JSONResponse(status_code=HTTP_STATUS[kind], content=error_body(kind, message))


async def _storefront_error_handler(_request: Request, exc: StorefrontError) -> JSONResponse:
    if exc.kind is ErrorKind.SERVICE_RUNTIME:
        logger.error("Downstream service failure", error=exc.message, cause=repr(exc.__cause__))
    return error_response(exc.kind, exc.message)


async def _validation_error_handler(_request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=HTTP_STATUS[ErrorKind.INVALID_ARGUMENT],
        content={"error": ErrorKind.INVALID_ARGUMENT.value, "message": exc.messages},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StorefrontError, _storefront_error_handler)
    app.add_exception_handler(ValidationError, _validation_error_handler)
