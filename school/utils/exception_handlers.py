"""Map application errors to HTTP responses."""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from school.exceptions import (
    AppError,
    DatabaseConnectionError,
    IdMismatchError,
    RecordNotFoundError,
    RecordValidationError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ErrorMapping:
    """HTTP answer for one application error type.

    ``public_message`` replaces the exception text when that text may carry
    driver or connection details.
    """

    status_code: int
    error_name: str
    level: int = logging.WARNING
    public_message: Optional[str] = None


ERROR_MAPPINGS: dict[type[AppError], ErrorMapping] = {
    RecordNotFoundError: ErrorMapping(status.HTTP_404_NOT_FOUND, "Not Found"),
    RecordValidationError: ErrorMapping(status.HTTP_400_BAD_REQUEST, "Bad Request"),
    IdMismatchError: ErrorMapping(status.HTTP_400_BAD_REQUEST, "Bad Request"),
    DatabaseConnectionError: ErrorMapping(
        status.HTTP_503_SERVICE_UNAVAILABLE,
        "Service Unavailable",
        level=logging.ERROR,
        public_message="Database connection error. Please try again later.",
    ),
}


def error_content(exc: AppError, mapping: ErrorMapping) -> dict[str, Any]:
    """Response body: error name, message and the exception's context fields."""
    return {
        "error": mapping.error_name,
        "message": mapping.public_message or str(exc),
        **exc.context,
    }


def app_error_handler(mapping: ErrorMapping):
    """Build the handler answering one application error type."""

    async def handler(request: Request, exc: AppError) -> JSONResponse:
        logger.log(
            mapping.level,
            f"{type(exc).__name__}: {exc}",
            extra={"path": request.url.path, **exc.context},
        )
        return JSONResponse(
            status_code=mapping.status_code, content=error_content(exc, mapping)
        )

    return handler


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer malformed request bodies and parameters with 422."""
    logger.warning(f"Validation error: {exc}")
    details = [
        {key: error[key] for key in ("type", "loc", "msg")} for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "Validation Error",
            "message": "Invalid request data",
            "details": details,
        },
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all unhandled exceptions."""
    logger.exception(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal Server Error",
            "message": "An unexpected error occurred. Please try again later.",
        },
    )


async def not_found_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> Response:
    """Render the not-found page for browsers and JSON for API clients."""
    from school.utils.templates import templates

    logger.warning(f"404 Not Found: {request.url.path}")

    if "text/html" in request.headers.get("accept", ""):
        return templates.TemplateResponse(
            request=request,
            name="404.html",
            context={"message": None},
            status_code=status.HTTP_404_NOT_FOUND,
        )

    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            "error": "Not Found",
            "message": f"The requested resource was not found: {request.url.path}",
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application."""
    for exc_type, mapping in ERROR_MAPPINGS.items():
        app.add_exception_handler(exc_type, app_error_handler(mapping))

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(404, not_found_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
