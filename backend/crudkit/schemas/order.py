"""Order views — attribute subsets exposed by OrderEntity."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class OrderSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    reference: str
    status: str
    total_cents: int


class OrderFull(OrderSummary):
    user_id: int
    created_at: datetime
