"""User views — attribute subsets exposed by UserEntity."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class UserSummary(BaseModel):
    """Default list view."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class UserFull(UserSummary):
    email: str
    active: bool
    created_at: datetime
