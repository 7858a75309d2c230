"""Order ORM — a purchase placed by a user.

Invariants:
    - Always belongs to a User (user_id FK)
    - reference is required and unique
    - total_cents >= 0 (integer cents, no float money)
    - status in ORDER_STATUSES
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from crudkit.db.base import Base, is_blank

ORDER_STATUSES = ("pending", "paid", "shipped", "cancelled")


class Order(Base):
    """Order resource."""
    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True,
    )
    reference: Mapped[str] = mapped_column(String(40), nullable=False, unique=True)
    total_cents: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="pending",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def validate(self) -> None:
        if self.user_id is None:
            self.errors.add("user", "must exist")
        if is_blank(self.reference):
            self.errors.add("reference", "can't be blank")
        if self.total_cents is not None:
            if not isinstance(self.total_cents, int) or isinstance(self.total_cents, bool):
                self.errors.add("total_cents", "is not a number")
            elif self.total_cents < 0:
                self.errors.add("total_cents", "must be greater than or equal to 0")
        if self.status is not None and self.status not in ORDER_STATUSES:
            self.errors.add("status", "is not included in the list")
