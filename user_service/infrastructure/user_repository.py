"""User Repository - SQLAlchemy implementation of the UserRepository protocol.

Invariants:
    - One SQL statement per operation against the `users` table
    - save() stamps created_at/updated_at from a single clock read on insert
      and refreshes updated_at on update
    - A failed commit is rolled back before the exception leaves save()

Design Decisions:
    - Commits inside save()/delete_by_id(): each operation is its own unit of work
    - find_all() orders by primary key so storage order is stable across backends
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import delete, exists, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from user_service.core.domain_types import UserId
from user_service.models.user import User

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SqlAlchemyUserRepository:
    """Persists users through an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def find_all(self) -> list[User]:
        result = await self._db.execute(select(User).order_by(User.id))
        return list(result.scalars().all())

    async def find_by_id(self, user_id: UserId) -> User | None:
        return await self._db.get(User, user_id)

    async def find_by_email(self, email: str) -> User | None:
        result = await self._db.execute(
            select(User).where(User.email == email),
        )
        return result.scalar_one_or_none()

    async def exists_by_email(self, email: str) -> bool:
        result = await self._db.execute(
            select(exists().where(User.email == email)),
        )
        return bool(result.scalar())

    async def save(self, user: User) -> User:
        """Insert a new user or update an existing one."""
        now = _utcnow()
        if user.id is None:
            user.created_at = now
        user.updated_at = now
        self._db.add(user)
        try:
            await self._db.commit()
        except IntegrityError:
            await self._db.rollback()
            raise
        await self._db.refresh(user)
        logger.debug("User saved", extra={"user_id": user.id})
        return user

    async def delete_by_id(self, user_id: UserId) -> bool:
        """Delete one user. Returns False when no row matched."""
        result = await self._db.execute(delete(User).where(User.id == user_id))
        await self._db.commit()
        return result.rowcount > 0

    async def delete_all(self) -> int:
        result = await self._db.execute(delete(User))
        await self._db.commit()
        return result.rowcount

    async def count(self) -> int:
        result = await self._db.execute(select(func.count()).select_from(User))
        return int(result.scalar_one())
