"""User field rules - pure checks for name/email plus pydantic error translation.

Invariants:
    - Field messages are fixed strings ("Name is required", "Email is required",
      "Invalid email address") so clients can match on them
    - Email shape is checked without DNS lookups and the value is never rewritten
    - Dotless and special-use domains (user@localhost) are accepted
    - Results are ordered: name errors before email errors

Design Decisions:
    - email-validator is the same checker pydantic's EmailStr delegates to; called
      directly so the stored address is exactly what the client sent
"""

from email_validator import EmailNotValidError, validate_email

from user_service.core.errors import FieldError

NAME_REQUIRED = "Name is required"
EMAIL_REQUIRED = "Email is required"
EMAIL_INVALID = "Invalid email address"

_REQUIRED_MESSAGES = {"name": NAME_REQUIRED, "email": EMAIL_REQUIRED}
_FIELD_ORDER = ("name", "email")


def check_name(name: str) -> str | None:
    """Return an error message for a blank name, else None."""
    if not name.strip():
        return NAME_REQUIRED
    return None


def check_email(email: str) -> str | None:
    """Return an error message for a blank or malformed email, else None."""
    if not email.strip():
        return EMAIL_REQUIRED
    try:
        validate_email(
            email, check_deliverability=False, globally_deliverable=False,
        )
    except EmailNotValidError:
        return EMAIL_INVALID
    return None


def describe_field_errors(errors: list[dict]) -> list[FieldError]:
    """Translate pydantic error dicts into (field, message) pairs.

    Accepts the shape produced by ValidationError.errors() and
    RequestValidationError.errors(); the leading "body" location is dropped.
    """
    described = [_describe(e) for e in errors]
    return sorted(described, key=_field_rank)


def _describe(error: dict) -> FieldError:
    loc = [str(part) for part in error.get("loc", ()) if part != "body"]
    field = ".".join(loc) or "body"
    kind = error.get("type", "")

    if kind == "missing" and field in _REQUIRED_MESSAGES:
        return FieldError(field, _REQUIRED_MESSAGES[field])
    if kind == "value_error":
        cause = (error.get("ctx") or {}).get("error")
        if cause is not None:
            return FieldError(field, str(cause))
    if kind in ("model_type", "model_attributes_type", "dict_type"):
        return FieldError(field, "Request body must be a JSON object")
    if kind == "string_type" and field in _REQUIRED_MESSAGES:
        return FieldError(field, f"{field.capitalize()} must be a string")
    return FieldError(field, error.get("msg", "Invalid value"))


def _field_rank(error: FieldError) -> int:
    if error.field in _FIELD_ORDER:
        return _FIELD_ORDER.index(error.field)
    return len(_FIELD_ORDER)
