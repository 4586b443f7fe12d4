"""Error handlers for the FastAPI application.

Every failure leaves the API in the same envelope:

    {"error": {"message": ..., "status_code": ..., "details": {...}}}
"""

from typing import Any, Dict, Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.exceptions import AppException
from core.logger import get_logger

logger = get_logger("core.error_handlers")

REQUEST_ID_HEADER = "x-request-id"


def create_error_response(
    message: str,
    status_code: int = 500,
    details: Optional[Dict[str, Any]] = None,
    request_id: Optional[str] = None,
) -> JSONResponse:
    """Build the error envelope.

    `details` and `request_id` are omitted from the body when empty.
    """
    error_body: Dict[str, Any] = {"message": message, "status_code": status_code}
    if details:
        error_body["details"] = details
    if request_id:
        error_body["request_id"] = request_id
    return JSONResponse(status_code=status_code, content={"error": error_body})


def _request_id(request: Request) -> Optional[str]:
    return request.headers.get(REQUEST_ID_HEADER)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    logger.warning("Application error: %s [%s %s]", exc.message, request.method, request.url.path)
    return create_error_response(
        message=exc.message,
        status_code=exc.status_code,
        details=exc.details,
        request_id=_request_id(request),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render framework-level HTTP errors (unknown route, wrong method) in the shared envelope."""
    return create_error_response(
        message=str(exc.detail),
        status_code=exc.status_code,
        request_id=_request_id(request),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Flatten pydantic validation errors into `field` / `message` / `type` triples."""
    errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]
    logger.warning("Validation error on %s %s: %s", request.method, request.url.path, errors)
    return create_error_response(
        message="Validation error",
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        details={"validation_errors": errors},
        request_id=_request_id(request),
    )


async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Database error on %s %s: %s", request.method, request.url.path, exc, exc_info=True)
    # Internal database messages stay in the log.
    return create_error_response(
        message="A database error occurred",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        details={"type": "database_error"},
        request_id=_request_id(request),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled exception on %s %s: %s", request.method, request.url.path, exc, exc_info=True)
    return create_error_response(
        message="An internal server error occurred",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        details={"type": "internal_error"},
        request_id=_request_id(request),
    )


def register_exception_handlers(app):
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
    logger.info("Exception handlers registered")
