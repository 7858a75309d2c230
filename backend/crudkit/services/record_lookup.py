"""Record Lookup — find one record by id, or query a collection by criteria.

Invariants:
    - find_by_id raises RecordNotFoundError (404) for absent or un-coercible ids
    - query passes the criteria mapping to the model's build_query unmodified
"""

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from crudkit.core.errors import ErrorContext, RecordNotFoundError
from crudkit.db.base import Base
from crudkit.services.request_context import RequestContext
from crudkit.services.resource_registry import ResourceType

logger = logging.getLogger(__name__)


class RecordLookup:
    def __init__(self, db: AsyncSession):
        self._db = db

    async def find_by_id(self, resource: ResourceType, record_id: Any) -> Base:
        key = resource.model.coerce_id(record_id)
        record = await self._db.get(resource.model, key) if key is not None else None
        if record is None:
            raise RecordNotFoundError(
                resource.model_name, record_id,
                ErrorContext(resource=resource.name, record_id=str(record_id)),
            )
        return record

    async def find_record(self, context: RequestContext) -> Base:
        return await self.find_by_id(context.resource, context.record_id)

    async def query(self, resource: ResourceType, criteria: dict[str, Any]) -> list[Base]:
        result = await self._db.execute(resource.model.build_query(criteria))
        records = list(result.scalars().all())
        logger.debug(
            f"Queried {len(records)} {resource.name}",
            extra={"resource": resource.name},
        )
        return records
