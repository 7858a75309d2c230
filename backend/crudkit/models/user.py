"""User ORM — an account that places orders.

Invariants:
    - name and email are required; email must look like an address
    - email is unique (DB index; violation surfaces as RecordNotUniqueError)
    - A user with orders cannot be destroyed (before_destroy adds a base error)

Design Decisions:
    - Uniqueness enforced by the database, not by a pre-insert SELECT:
      no race window, and the statement error path stays exercised
"""

import re
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Integer, String, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Mapped, mapped_column

from crudkit.core.record_errors import BASE
from crudkit.db.base import Base, is_blank

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class User(Base):
    """User resource."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def validate(self) -> None:
        if is_blank(self.name):
            self.errors.add("name", "can't be blank")
        elif len(str(self.name)) > 100:
            self.errors.add("name", "is too long (maximum is 100 characters)")
        if is_blank(self.email):
            self.errors.add("email", "can't be blank")
        elif not isinstance(self.email, str) or not EMAIL_PATTERN.match(self.email):
            self.errors.add("email", "is invalid")

    async def before_destroy(self, db: AsyncSession) -> None:
        from crudkit.models.order import Order

        count = await db.scalar(
            select(func.count()).select_from(Order).where(Order.user_id == self.id),
        )
        if count:
            self.errors.add(BASE, "Cannot delete record because dependent orders exist")
