"""API Dependencies - explicit wiring of repository → service, plus body parsing.

Invariants:
    - One repository and one service per request, sharing the request's session
    - POST bodies are checked in order: content type, JSON syntax, field rules

Design Decisions:
    - Body parsed by hand instead of a pydantic body parameter: FastAPI parses a
      body without Content-Type as JSON, and the contract requires 415 there
"""

import json

from fastapi import Depends, Request
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from user_service.core.errors import (
    MalformedRequestError, UnsupportedMediaTypeError, UserValidationError,
)
from user_service.core.validate_user import describe_field_errors
from user_service.infrastructure.database import get_db
from user_service.infrastructure.user_repository import SqlAlchemyUserRepository
from user_service.schemas.user import CreateUserRequest
from user_service.services.user_service import UserService

JSON_MEDIA_TYPE = "application/json"


def get_user_repository(
    db: AsyncSession = Depends(get_db),
) -> SqlAlchemyUserRepository:
    return SqlAlchemyUserRepository(db)


def get_user_service(
    repository: SqlAlchemyUserRepository = Depends(get_user_repository),
) -> UserService:
    return UserService(repository)


def require_json_content_type(request: Request) -> None:
    content_type = request.headers.get("content-type")
    media_type = (content_type or "").split(";", 1)[0].strip().lower()
    if media_type != JSON_MEDIA_TYPE:
        raise UnsupportedMediaTypeError(content_type)


async def read_create_user_request(
    request: Request, _: None = Depends(require_json_content_type),
) -> CreateUserRequest:
    """Parse and validate the create-user body."""
    try:
        payload = json.loads(await request.body())
    except (ValueError, RecursionError) as e:
        raise MalformedRequestError() from e
    try:
        return CreateUserRequest.model_validate(payload)
    except ValidationError as e:
        raise UserValidationError(describe_field_errors(e.errors())) from e
