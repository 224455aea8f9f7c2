"""Error boundary - framework errors and unexpected failures as problem bodies."""

import pytest
from fastapi.exceptions import RequestValidationError
from httpx import ASGITransport, AsyncClient

from user_service.api.dependencies import get_user_service
from user_service.api.error_handlers import classify_error
from user_service.core.errors import (
    DatabaseError, EmailAlreadyUsedError, UnsupportedMediaTypeError,
)
from user_service.main import app


async def test_unsupported_method_returns_405(client):
    res = await client.delete("/api/users")

    assert res.status_code == 405
    assert res.json() == {
        "type": "about:blank",
        "title": "Method Not Allowed",
        "status": 405,
        "detail": "The requested method is not supported for this endpoint.",
    }
    assert "allow" in res.headers


async def test_unknown_route_returns_404_problem(client):
    res = await client.get("/api/nothing-here")

    assert res.status_code == 404
    assert res.json()["title"] == "Not Found"


class _ExplodingService:
    async def get_all_users(self):
        raise RuntimeError("secret connection string postgres://u:p@db")


@pytest.fixture
async def failing_client():
    app.dependency_overrides[get_user_service] = lambda: _ExplodingService()
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


async def test_unexpected_failure_returns_generic_500(failing_client):
    res = await failing_client.get("/api/users")

    assert res.status_code == 500
    body = res.json()
    assert body["title"] == "Internal Server Error"
    assert body["detail"] == "Something went wrong."
    assert "secret" not in res.text


def test_classify_unsupported_media_type_is_plain_text():
    status, body, headers = classify_error(UnsupportedMediaTypeError())
    assert status == 415
    assert isinstance(body, str)
    assert headers == {}


def test_classify_domain_error_uses_problem_body():
    status, body, _ = classify_error(EmailAlreadyUsedError("a@b.com"))
    assert status == 409
    assert body["title"] == "Email already used"


def test_classify_database_error_is_generic_500():
    status, body, _ = classify_error(DatabaseError("disk I/O error", "execute"))
    assert status == 500
    assert "disk" not in body["detail"]


def test_classify_unknown_exception():
    status, body, _ = classify_error(KeyError("boom"))
    assert status == 500
    assert body == {
        "type": "about:blank",
        "title": "Internal Server Error",
        "status": 500,
        "detail": "Something went wrong.",
    }


def test_classify_request_validation_error_uses_field_messages():
    exc = RequestValidationError([
        {"type": "missing", "loc": ("body", "name"), "msg": "Field required"},
    ])
    status, body, _ = classify_error(exc)
    assert status == 400
    assert body["errors"] == [{"field": "name", "message": "Name is required"}]
