"""User Schemas - Pydantic models for the /api/users boundary.

Invariants:
    - CreateUserRequest.name: not blank, stored as sent
    - CreateUserRequest.email: non-empty, valid email shape, stored as sent
    - UserResponse serializes with camelCase keys (createdAt, updatedAt)
    - UserResponse timestamps are always UTC-aware, whatever the backend returns

Design Decisions:
    - field_validator raises ValueError with the client-facing message; the
      API boundary reads it back from the error ctx
    - Optional fields with validate_default: a missing field and a blank one
      produce the same "is required" message
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from user_service.core.validate_user import (
    EMAIL_REQUIRED, NAME_REQUIRED, check_email, check_name,
)


class CreateUserRequest(BaseModel):
    """User creation - validates name presence and email shape."""
    name: str | None = Field(None, max_length=255, validate_default=True)
    email: str | None = Field(None, max_length=320, validate_default=True)

    @field_validator("name")
    @classmethod
    def require_name(cls, v: str | None) -> str:
        if v is None:
            raise ValueError(NAME_REQUIRED)
        problem = check_name(v)
        if problem:
            raise ValueError(problem)
        return v

    @field_validator("email")
    @classmethod
    def require_email(cls, v: str | None) -> str:
        if v is None:
            raise ValueError(EMAIL_REQUIRED)
        problem = check_email(v)
        if problem:
            raise ValueError(problem)
        return v


class UserResponse(BaseModel):
    """User response - public-facing user data."""
    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True,
    )

    id: int
    name: str
    email: str
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        # SQLite hands timestamps back without tzinfo; they were written in UTC
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v
