"""Operation Base — the contract every business-logic unit implements.

Invariants:
    - __call__ returns a Result (Success | Failure); expected business failures are
      Failure values, not exceptions
    - input_shape tells the executor how to lay out keyword input
    - resource (when set) restricts the operation to that routing segment
"""

from typing import Any, ClassVar

from sqlalchemy.ext.asyncio import AsyncSession

from crudkit.core.domain_types import InputShape
from crudkit.core.result import Result
from crudkit.services.record_store import RecordStore


class Operation:
    """Base class; instantiated per call with the request's DB session."""

    name: ClassVar[str]
    resource: ClassVar[str | None] = None
    input_shape: ClassVar[InputShape] = InputShape.AUTO

    def __init__(self, db: AsyncSession):
        self._db = db
        self._store = RecordStore(db)

    async def __call__(self, **input: Any) -> Result:
        raise NotImplementedError
