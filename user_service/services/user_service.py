"""User Service - the email-uniqueness rule and persistence orchestration.

Invariants:
    - create_user() never writes when exists_by_email() is true
    - A unique-constraint violation during save (lost race with a concurrent
      insert) surfaces as the same EmailAlreadyUsedError
    - id and timestamps in the response come from the persisted row

Design Decisions:
    - Repository injected through the constructor: no container, tests pass fakes
    - Check-then-insert is not atomic; the storage constraint is the race backstop
      and the existence check is the fast, friendly path
"""

import logging

from sqlalchemy.exc import IntegrityError

from user_service.core.errors import EmailAlreadyUsedError
from user_service.core.repository_protocols import UserRepository
from user_service.models.user import User
from user_service.schemas.user import CreateUserRequest, UserResponse

logger = logging.getLogger(__name__)


class UserService:
    """Use cases for listing and creating users."""

    def __init__(self, repository: UserRepository):
        self._repository = repository

    async def get_all_users(self) -> list[User]:
        return await self._repository.find_all()

    async def create_user(self, request: CreateUserRequest) -> UserResponse:
        """Create a user, rejecting emails that are already registered."""
        if await self._repository.exists_by_email(request.email):
            logger.info(
                "Rejected duplicate email", extra={"email": request.email},
            )
            raise EmailAlreadyUsedError(request.email)

        try:
            user = await self._repository.save(
                User(name=request.name, email=request.email),
            )
        except IntegrityError as e:
            logger.warning(
                f"Unique constraint rejected insert: {e.orig}",
                extra={"email": request.email},
            )
            raise EmailAlreadyUsedError(request.email) from e

        logger.info("User created", extra={"user_id": user.id})
        return UserResponse.model_validate(user)
