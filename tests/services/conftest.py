"""Service test fixtures - in-memory fake of the UserRepository protocol.

Invariants:
    - FakeUserRepository mimics the store: assigns ids and timestamps on save,
      raises IntegrityError on a duplicate email
    - `saves` records every save() call so tests can assert no write happened
"""

from datetime import datetime, timezone

import pytest
from sqlalchemy.exc import IntegrityError

from user_service.models.user import User


class FakeUserRepository:
    def __init__(self):
        self.rows: dict[int, User] = {}
        self.saves: list[User] = []
        self.hide_existing = False
        self._next_id = 1

    async def find_all(self) -> list[User]:
        return list(self.rows.values())

    async def find_by_id(self, user_id):
        return self.rows.get(user_id)

    async def find_by_email(self, email):
        return next((u for u in self.rows.values() if u.email == email), None)

    async def exists_by_email(self, email) -> bool:
        if self.hide_existing:
            return False
        return await self.find_by_email(email) is not None

    async def save(self, user: User) -> User:
        self.saves.append(user)
        if await self.find_by_email(user.email) is not None:
            raise IntegrityError("INSERT INTO users", {}, Exception("UNIQUE constraint failed: users.email"))
        now = datetime.now(timezone.utc)
        user.id = self._next_id
        user.created_at = now
        user.updated_at = now
        self.rows[user.id] = user
        self._next_id += 1
        return user

    async def delete_by_id(self, user_id) -> bool:
        return self.rows.pop(user_id, None) is not None

    async def count(self) -> int:
        return len(self.rows)


@pytest.fixture
def fake_repository():
    return FakeUserRepository()
