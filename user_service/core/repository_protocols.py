"""Boundary Protocols - contracts between the service layer and persistence.

Invariants:
    - Services depend on UserRepository, never on AsyncSession directly
    - save() assigns id and timestamps; callers never set them

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass plain fakes
    - Async in Protocol: implementations do IO through the async engine
"""

from typing import Protocol

from user_service.core.domain_types import UserId
from user_service.models.user import User


class UserRepository(Protocol):
    """Contract for user persistence - implemented in infrastructure/."""
    async def find_all(self) -> list[User]: ...
    async def find_by_id(self, user_id: UserId) -> User | None: ...
    async def find_by_email(self, email: str) -> User | None: ...
    async def exists_by_email(self, email: str) -> bool: ...
    async def save(self, user: User) -> User: ...
    async def delete_by_id(self, user_id: UserId) -> bool: ...
    async def count(self) -> int: ...
