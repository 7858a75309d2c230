"""Operation Routes — run a registered operation now, or enqueue it.

Invariants:
    - Operations are looked up per resource (UnknownOperationError → 404)
    - /enqueue variants acknowledge with {"message": "Operation queued."} and never
      wait for the operation
"""

from fastapi import APIRouter, Depends

from crudkit.api.dependencies import (
    get_operation_executor, get_registries, get_request_context,
)
from crudkit.services.operation_executor import OperationExecutor
from crudkit.services.registries import Registries
from crudkit.services.request_context import RequestContext

router = APIRouter(tags=["operations"])


@router.post("/{resource}/operations/{operation}")
@router.post("/{resource}/{id}/operations/{operation}")
async def perform_operation(
    operation: str,
    context: RequestContext = Depends(get_request_context),
    registries: Registries = Depends(get_registries),
    executor: OperationExecutor = Depends(get_operation_executor),
):
    """Run the operation synchronously and render its Result."""
    operation_cls = registries.operations.for_resource(operation, context.resource.name)
    return await executor.perform(operation_cls, view=context.view)


@router.post("/{resource}/operations/{operation}/enqueue")
@router.post("/{resource}/{id}/operations/{operation}/enqueue")
async def enqueue_operation(
    operation: str,
    context: RequestContext = Depends(get_request_context),
    registries: Registries = Depends(get_registries),
    executor: OperationExecutor = Depends(get_operation_executor),
):
    """Hand the operation to the job queue and acknowledge immediately."""
    operation_cls = registries.operations.for_resource(operation, context.resource.name)
    return executor.perform_async(operation_cls)
