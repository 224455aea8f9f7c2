"""Error Handlers - global exception handlers mapping failures to problem responses.

Invariants:
    - UserServiceError → its own status and problem body
    - RequestValidationError → 400 with field-level details
    - Framework HTTP errors (404, 405) → problem body with the same shape
    - Exception (catch-all) → 500, never leaks internal details
    - UnsupportedMediaTypeError is the only plain-text response

Design Decisions:
    - One classification function (classify_error) decides status, body and
      headers for every error kind; the registered handlers only log and render
    - Problem bodies served as application/problem+json
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from user_service.core.errors import (
    PROBLEM_TYPE_BLANK, UnsupportedMediaTypeError, UserServiceError,
    UserValidationError,
)
from user_service.core.validate_user import describe_field_errors

logger = logging.getLogger(__name__)

PROBLEM_MEDIA_TYPE = "application/problem+json"

_HTTP_ERROR_DETAILS = {
    status.HTTP_405_METHOD_NOT_ALLOWED:
        "The requested method is not supported for this endpoint.",
    status.HTTP_404_NOT_FOUND: "The requested resource was not found.",
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def classify_error(exc: Exception) -> tuple[int, dict | str, dict[str, str]]:
    """Map an exception to (status code, body, extra headers)."""
    if isinstance(exc, UnsupportedMediaTypeError):
        return exc.http_status, exc.detail, {}
    if isinstance(exc, UserServiceError):
        return exc.http_status, exc.to_problem(), {}
    if isinstance(exc, RequestValidationError):
        field_errors = describe_field_errors(list(exc.errors()))
        return status.HTTP_400_BAD_REQUEST, UserValidationError(field_errors).to_problem(), {}
    if isinstance(exc, StarletteHTTPException):
        return exc.status_code, _http_problem(exc), dict(exc.headers or {})
    return (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        _problem(status.HTTP_500_INTERNAL_SERVER_ERROR, "Something went wrong."),
        {},
    )


def render_error(exc: Exception) -> Response:
    status_code, body, headers = classify_error(exc)
    if isinstance(body, str):
        return PlainTextResponse(body, status_code=status_code, headers=headers)
    return JSONResponse(
        body, status_code=status_code, headers=headers,
        media_type=PROBLEM_MEDIA_TYPE,
    )


def _problem(status_code: int, detail: str, title: str | None = None) -> dict:
    return {
        "type": PROBLEM_TYPE_BLANK,
        "title": title or HTTPStatus(status_code).phrase,
        "status": status_code,
        "detail": detail,
    }


def _http_problem(exc: StarletteHTTPException) -> dict:
    detail = _HTTP_ERROR_DETAILS.get(exc.status_code)
    if detail is None:
        detail = exc.detail if isinstance(exc.detail, str) else HTTPStatus(exc.status_code).phrase
    return _problem(exc.status_code, detail)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register user-service domain/infrastructure error handler."""

    @app.exception_handler(UserServiceError)
    async def user_service_error_handler(request: Request, exc: UserServiceError):
        """Handle all user-service domain/infrastructure errors."""
        log = logger.warning if exc.http_status < 500 else logger.error
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return render_error(exc)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return render_error(exc)


def _register_http_error_handler(app: FastAPI) -> None:
    """Register handler for routing errors raised by the framework."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        logger.info(
            f"HTTP {exc.status_code} on {request.method} {request.url.path}",
            extra={"status": exc.status_code, "path": request.url.path},
        )
        return render_error(exc)


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return render_error(exc)
