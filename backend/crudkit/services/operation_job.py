"""Operation Job — executes a queued operation outside the request.

Invariants:
    - Uses its own DB session (the request session is closed when this runs)
    - The Result is logged, never returned to anyone
    - No exception escapes the runner: every failure ends as a log line
    - Record-shaped inputs are re-derived from the job params (id -> record),
      so the job carries only serializable data

Design Decisions:
    - Background failures are logged, not retried (ADR: fire-and-forget, no
      dead-letter queue)
"""

import logging

from crudkit.core.errors import CrudKitError
from crudkit.core.result import Failure, Success
from crudkit.infrastructure.job_queue import QueuedJob
from crudkit.operations.registry import OperationRegistry
from crudkit.services.input_extractor import derive_operation_input
from crudkit.services.record_lookup import RecordLookup
from crudkit.services.resource_registry import ResourceRegistry

logger = logging.getLogger(__name__)


class OperationJobRunner:
    def __init__(self, resources: ResourceRegistry, operations: OperationRegistry):
        self._resources = resources
        self._operations = operations

    async def __call__(self, job: QueuedJob) -> None:
        from crudkit.infrastructure.database import db_manager

        extra = {"operation": job.operation, "job_id": job.job_id}
        if not db_manager:
            logger.error(
                f"Cannot run {job.operation}: database not initialized", extra=extra,
            )
            return

        try:
            operation_cls = self._operations.get(job.operation)
            resource = (
                self._resources.get(operation_cls.resource)
                if operation_cls.resource else None
            )
            async with db_manager.session() as db:
                operation_input = await derive_operation_input(
                    job.params, operation_cls.input_shape, operation_cls.name,
                    RecordLookup(db), resource,
                )
                result = await operation_cls(db)(**operation_input)
        except CrudKitError as e:
            logger.error(
                f"Queued operation {job.operation} failed: {e.message}",
                extra={**extra, "error_code": e.code},
            )
            return
        except Exception as e:
            logger.error(
                f"Queued operation {job.operation} crashed: {e}",
                extra={**extra, "error_code": "OPERATION_CRASHED"},
                exc_info=True,
            )
            return

        if not isinstance(result, (Success, Failure)):
            logger.error(
                f"Queued operation {job.operation} did not return a Result",
                extra={**extra, "error_code": "OPERATION_CRASHED"},
            )
        elif result.ok:
            logger.info(f"Queued operation {job.operation} succeeded", extra=extra)
        else:
            logger.warning(
                f"Queued operation {job.operation} returned a failure",
                extra={**extra, "error_code": "OPERATION_FAILURE"},
            )
