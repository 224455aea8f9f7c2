"""Error Hierarchy - typed exceptions for every user-service failure mode.

Invariants:
    - Every error carries a code, category, title, detail and HTTP status
    - to_problem() produces the problem body {type, title, status, detail}
    - Infrastructure errors never put driver messages in `detail`

Design Decisions:
    - Single hierarchy with UserServiceError base: the API boundary catches all
      (ADR: uniform error shape)
    - Problem type URIs are stable identifiers, not resolvable documentation
"""

from dataclasses import dataclass
from enum import Enum

PROBLEM_TYPE_BLANK = "about:blank"
PROBLEM_TYPE_VALIDATION = "https://smartorder.com/errors/validation"
PROBLEM_TYPE_EMAIL_ALREADY_USED = "https://smartorder.com/errors/email-already-used"


class ErrorCategory(str, Enum):
    """High-level error categories for logging and handling."""
    VALIDATION = "validation"
    MALFORMED_REQUEST = "malformed_request"
    UNSUPPORTED_MEDIA_TYPE = "unsupported_media_type"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass(frozen=True)
class FieldError:
    """One field-level validation failure."""
    field: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


class UserServiceError(Exception):
    """Base exception for all user-service errors."""

    def __init__(
        self,
        detail: str,
        code: str,
        category: ErrorCategory,
        title: str,
        http_status: int = 500,
        type_uri: str = PROBLEM_TYPE_BLANK,
    ):
        super().__init__(detail)
        self.detail = detail
        self.code = code
        self.category = category
        self.title = title
        self.http_status = http_status
        self.type_uri = type_uri

    @property
    def message(self) -> str:
        return self.detail

    def to_problem(self) -> dict:
        """Convert to a problem body."""
        return {
            "type": self.type_uri,
            "title": self.title,
            "status": self.http_status,
            "detail": self.detail,
        }


# ─── Request Errors (400-level) ─────────────────────────────────

class UserValidationError(UserServiceError):
    """Request body fields failed validation."""
    def __init__(self, field_errors: list[FieldError]):
        detail = ", ".join(
            f"{e.field}:{e.message}" for e in field_errors
        ) or "Invalid input"
        super().__init__(
            detail, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            "Validation Error", 400, PROBLEM_TYPE_VALIDATION,
        )
        self.field_errors = field_errors

    def to_problem(self) -> dict:
        problem = super().to_problem()
        problem["errors"] = [e.to_dict() for e in self.field_errors]
        return problem


class MalformedRequestError(UserServiceError):
    """Request body could not be parsed as JSON."""
    def __init__(self):
        super().__init__(
            "Your request body was unreadable or invalid.",
            "MALFORMED_JSON", ErrorCategory.MALFORMED_REQUEST,
            "Malformed JSON request", 400,
        )


class UnsupportedMediaTypeError(UserServiceError):
    """Request Content-Type missing or not JSON. Rendered as plain text."""
    def __init__(self, content_type: str | None = None):
        super().__init__(
            "Unsupported content type. Please use application/json.",
            "UNSUPPORTED_MEDIA_TYPE", ErrorCategory.UNSUPPORTED_MEDIA_TYPE,
            "Unsupported Media Type", 415,
        )
        self.content_type = content_type


class EmailAlreadyUsedError(UserServiceError):
    """A user with the requested email already exists."""
    def __init__(self, email: str, message: str = "Email already in use"):
        super().__init__(
            message, "EMAIL_ALREADY_USED", ErrorCategory.CONFLICT,
            "Email already used", 409, PROBLEM_TYPE_EMAIL_ALREADY_USED,
        )
        self.email = email


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(UserServiceError):
    """Database operation failed. Detail stays generic; cause is logged."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            "Something went wrong.", "DATABASE_ERROR", ErrorCategory.DATABASE,
            "Internal Server Error", 500,
        )
        self.reason = message
        self.operation = operation
