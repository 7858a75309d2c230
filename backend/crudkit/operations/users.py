"""User operations — deactivate, rename, stats, purge."""

from sqlalchemy import func, select

from crudkit.core.domain_types import InputShape
from crudkit.core.result import Failure, Result, Success
from crudkit.models.user import User
from crudkit.operations.base import Operation


class DeactivateUser(Operation):
    """Mark a user inactive. Input: the user only."""
    name = "deactivate_user"
    resource = "users"
    input_shape = InputShape.RECORD

    async def __call__(self, user: User) -> Result:
        if not user.active:
            return Failure.message(f"User {user.id} is already inactive")
        user.active = False
        if not await self._store.save(user):
            return Failure.invalid(user)
        return Success.record(user)


class RenameUser(Operation):
    """Rename a user. Input: the user plus params with `name`."""
    name = "rename_user"
    resource = "users"
    input_shape = InputShape.RECORD_WITH_PARAMS

    async def __call__(self, user: User, params: dict) -> Result:
        user.name = params.get("name")
        if not await self._store.save(user):
            return Failure.invalid(user)
        return Success.record(user)


class UserStats(Operation):
    """Counts of users, optionally restricted by `active`. Returns raw JSON."""
    name = "user_stats"
    resource = "users"
    input_shape = InputShape.PARAMS

    async def __call__(self, **params) -> Result:
        total = await self._db.scalar(select(func.count()).select_from(User))
        active = await self._db.scalar(
            select(func.count()).select_from(User).where(User.active.is_(True)),
        )
        return Success.structure({
            "total": total,
            "active": active,
            "inactive": total - active,
        })


class PurgeUser(Operation):
    """Delete a user; blocked deletions raise RecordNotDestroyedError (400)."""
    name = "purge_user"
    resource = "users"
    input_shape = InputShape.RECORD

    async def __call__(self, user: User) -> Result:
        user_id = user.id
        await self._store.destroy_or_raise(user)
        return Success.message(f"User {user_id} purged")
