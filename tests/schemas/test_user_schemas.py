"""User schemas - request validation and camelCase response serialization."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from user_service.models.user import User
from user_service.schemas.user import CreateUserRequest, UserResponse


def test_create_request_keeps_name_as_sent():
    req = CreateUserRequest(name="  John Doe  ", email="john@example.com")
    assert req.name == "  John Doe  "


def test_create_request_keeps_email_as_sent():
    req = CreateUserRequest(name="John", email="John.Doe@Example.com")
    assert req.email == "John.Doe@Example.com"


@pytest.mark.parametrize("payload", [
    {"name": "", "email": "a@b.com"},
    {"name": "   ", "email": "a@b.com"},
    {"email": "a@b.com"},
    {"name": "John Doe", "email": "not-an-email"},
    {"name": "John Doe", "email": ""},
    {"name": "John Doe"},
])
def test_create_request_rejects_invalid_payloads(payload):
    with pytest.raises(ValidationError):
        CreateUserRequest.model_validate(payload)


def test_user_response_uses_camel_case_keys():
    now = datetime(2026, 1, 1, tzinfo=timezone.utc)
    user = User(id=1, name="John", email="john@example.com",
                created_at=now, updated_at=now)
    data = UserResponse.model_validate(user).model_dump(by_alias=True)
    assert set(data) == {"id", "name", "email", "createdAt", "updatedAt"}
    assert data["createdAt"] == now


def test_user_response_treats_naive_timestamps_as_utc():
    naive = datetime(2026, 1, 1, 12, 30)
    user = User(id=1, name="John", email="john@example.com",
                created_at=naive, updated_at=naive)
    response = UserResponse.model_validate(user)
    assert response.created_at == naive.replace(tzinfo=timezone.utc)
    assert response.updated_at.tzinfo is not None
