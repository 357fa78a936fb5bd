"""Interface layer error handling.

Maps domain errors raised anywhere below the routes to HTTP responses.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import InterfaceError as DBInterfaceError
from sqlalchemy.exc import OperationalError

from ask.domain.error import (
    ForbiddenError,
    NotFoundError,
    StorageConflictError,
    StorageUnavailableError,
    ValidationError,
)


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": exc.message, "field": exc.field, "message": exc.message},
    )


async def handle_forbidden_error(request: Request, exc: ForbiddenError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN,
        content={"detail": f"Not allowed to {exc.action} this {exc.resource}"},
    )


async def handle_not_found_error(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": f"{exc.resource} not found"},
    )


async def handle_conflict_error(
    request: Request, exc: StorageConflictError
) -> JSONResponse:
    logfire.warn("Unresolved storage conflict", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": "Conflicting concurrent update, please retry"},
    )


async def handle_storage_unavailable(request: Request, exc: Exception) -> JSONResponse:
    """Database outages and timeouts become 503 instead of 500."""
    logfire.error("Storage unavailable", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Storage temporarily unavailable"},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the domain error to HTTP status mapping on an app."""
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(ForbiddenError, handle_forbidden_error)
    app.add_exception_handler(NotFoundError, handle_not_found_error)
    app.add_exception_handler(StorageConflictError, handle_conflict_error)
    app.add_exception_handler(StorageUnavailableError, handle_storage_unavailable)
    app.add_exception_handler(OperationalError, handle_storage_unavailable)
    app.add_exception_handler(DBInterfaceError, handle_storage_unavailable)
