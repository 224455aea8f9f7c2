"""User ORM - the single persisted entity.

Invariants:
    - id is assigned by the store on insert (autoincrement)
    - email carries a UNIQUE constraint; it backstops the service's existence check
    - created_at/updated_at are written by the repository, never by callers

Design Decisions:
    - BigInteger with an SQLite Integer variant: SQLite only autoincrements
      INTEGER PRIMARY KEY columns
    - No server defaults on timestamps: the repository owns them so both values
      come from one clock read
"""

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from user_service.db.base import Base


class User(Base):
    """A registered user."""
    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint("email", name="uq_users_email"),
    )

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, email={self.email!r})"
