"""User Routes - list and create users.

Invariants:
    - GET /api/users always returns 200 with a JSON array (empty when no users)
    - POST /api/users returns 201 with the created user
    - Routes hold no business logic; errors are rendered by api/error_handlers.py

Design Decisions:
    - Create returns 201 Created (REST convention for a new resource)
    - Request body schema declared via openapi_extra because the body is parsed
      by a dependency, not a pydantic body parameter
"""

import logging

from fastapi import APIRouter, Depends, status

from user_service.api.dependencies import get_user_service, read_create_user_request
from user_service.schemas.user import CreateUserRequest, UserResponse
from user_service.services.user_service import UserService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
async def list_users(service: UserService = Depends(get_user_service)):
    """List every user in storage order."""
    users = await service.get_all_users()
    return [UserResponse.model_validate(u) for u in users]


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {
                    "schema": CreateUserRequest.model_json_schema(),
                },
            },
        },
    },
)
async def create_user(
    body: CreateUserRequest = Depends(read_create_user_request),
    service: UserService = Depends(get_user_service),
):
    """Create a user with a unique email."""
    return await service.create_user(body)
