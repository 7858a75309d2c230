"""Record Store — persistence calls used by action templates and operations.

Invariants:
    - save/update/destroy return False (never raise) when the record rejects itself;
      the record's errors explain why
    - Database constraint failures roll back and raise StatementInvalidError /
      RecordNotUniqueError for the outermost error handler
    - One commit per mutation; transactions are not orchestrated across calls

Design Decisions:
    - bool-returning mutations plus *_or_raise strict variants: templates check the
      outcome, operations may prefer the exception path (RecordInvalidError)
"""

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError, StatementError
from sqlalchemy.ext.asyncio import AsyncSession

from crudkit.core.errors import (
    RecordInvalidError, RecordNotDestroyedError, RecordNotUniqueError,
    StatementInvalidError,
)
from crudkit.db.base import Base

logger = logging.getLogger(__name__)


class RecordStore:
    """Validates and persists records through one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def save(self, record: Base) -> bool:
        if not record.is_valid():
            return False
        self._db.add(record)
        await self._commit()
        await self._db.refresh(record)
        return True

    async def update(self, record: Base, attributes: dict[str, Any]) -> bool:
        record.assign_attributes(attributes)
        return await self.save(record)

    async def destroy(self, record: Base) -> bool:
        record.errors.clear()
        await record.before_destroy(self._db)
        if record.errors:
            return False
        await self._db.delete(record)
        await self._commit()
        return True

    async def save_or_raise(self, record: Base) -> Base:
        if not await self.save(record):
            raise RecordInvalidError(record)
        return record

    async def destroy_or_raise(self, record: Base) -> Base:
        if not await self.destroy(record):
            raise RecordNotDestroyedError(
                record.errors.to_sentence() or "Failed to destroy the record",
            )
        return record

    async def _commit(self) -> None:
        try:
            await self._db.commit()
        except IntegrityError as e:
            await self._db.rollback()
            message = str(e.orig)
            logger.warning(f"Integrity error: {message}")
            if "unique" in message.lower() or "duplicate" in message.lower():
                raise RecordNotUniqueError(message) from e
            raise StatementInvalidError(message) from e
        except StatementError as e:
            await self._db.rollback()
            message = str(e.orig) if e.orig is not None else str(e)
            logger.warning(f"Statement error: {message}")
            raise StatementInvalidError(message) from e
