"""
Exception handlers for the application.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from storefront.exceptions import DATA_ACCESS_ERRORS, AuthenticationError, ConflictError
from storefront.monitoring import get_request_id

logger = logging.getLogger(__name__)


def _error_body(request: Request, error: str, detail, request_id: str) -> dict:
    return {
        "error": error,
        "detail": detail,
        "path": request.url.path,
        "method": request.method,
        "request_id": request_id,
    }


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler for unhandled exceptions.
    """
    request_id = get_request_id() or '-'
    logger.error(
        f"Unhandled exception in {request.method} {request.url.path}: {str(exc)}",
        exc_info=exc,
        extra={"exception_type": type(exc).__name__},
    )
    return JSONResponse(
        status_code=500,
        content=_error_body(
            request,
            "Internal server error",
            "An unexpected error occurred. Please try again or contact support if the issue persists.",
            request_id,
        ),
    )


async def data_access_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handler for database driver errors (connectivity, constraints, bad queries).
    """
    request_id = get_request_id() or '-'
    logger.error(
        f"Database error in {request.method} {request.url.path}: {exc}",
        exc_info=exc,
        extra={"error_type": type(exc).__name__},
    )
    return JSONResponse(
        status_code=500,
        content=_error_body(
            request,
            "Database error",
            "A database operation failed. Please try again or contact support if the issue persists.",
            request_id,
        ),
    )


async def conflict_exception_handler(request: Request, exc: ConflictError) -> JSONResponse:
    request_id = get_request_id() or '-'
    logger.info(f"Conflict in {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=409, content=_error_body(request, "Conflict", str(exc), request_id))


async def authentication_exception_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
    request_id = get_request_id() or '-'
    logger.warning(f"Failed login attempt on {request.url.path}")
    return JSONResponse(status_code=401, content=_error_body(request, "Unauthorized", str(exc), request_id))


async def validation_exception_handler(request: Request, exc) -> JSONResponse:
    """
    Handle request validation errors with clear messages.

    Also used for pydantic errors raised by the service layer, such as a
    partial update that would leave a record in an invalid state.
    """
    request_id = get_request_id() or '-'
    errors = []
    for error in exc.errors():
        field = " -> ".join(str(loc) for loc in error["loc"])
        errors.append(f"{field}: {error['msg']}")

    logger.warning(
        f"Validation error in {request.method} {request.url.path}: {', '.join(errors)}",
        extra={"errors": errors},
    )
    body = _error_body(request, "Validation error", "One or more fields failed validation", request_id)
    body["errors"] = errors
    response = JSONResponse(status_code=422, content=body)
    if request_id != '-':
        response.headers["X-Request-ID"] = request_id
    return response


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.
    """
    app.add_exception_handler(Exception, global_exception_handler)
    for error_cls in DATA_ACCESS_ERRORS:
        app.add_exception_handler(error_cls, data_access_exception_handler)
    app.add_exception_handler(ConflictError, conflict_exception_handler)
    app.add_exception_handler(AuthenticationError, authentication_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ValidationError, validation_exception_handler)
