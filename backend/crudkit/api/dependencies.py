"""Request Dependencies — build the request-scoped services for each route.

Invariants:
    - RequestContext is resolved once per request (FastAPI dependency cache) and
      shared by every service built for that request
    - Registries come from app.state (built and validated at import of main)
"""

from typing import Any

from fastapi import BackgroundTasks, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from crudkit.config import get_settings
from crudkit.infrastructure.database import get_db
from crudkit.infrastructure.job_queue import BackgroundJobQueue, JobQueue
from crudkit.services.action_templates import ActionTemplates
from crudkit.services.input_extractor import read_raw_params
from crudkit.services.operation_executor import OperationExecutor
from crudkit.services.operation_job import OperationJobRunner
from crudkit.services.presenter_resolver import PresenterResolver
from crudkit.services.record_lookup import RecordLookup
from crudkit.services.record_store import RecordStore
from crudkit.services.registries import Registries
from crudkit.services.request_context import RequestContext, build_request_context
from crudkit.services.result_renderer import ResultRenderer


def get_registries(request: Request) -> Registries:
    return request.app.state.registries


async def get_raw_params(request: Request) -> dict[str, Any]:
    return await read_raw_params(request)


async def get_request_context(
    resource: str,
    raw_params: dict[str, Any] = Depends(get_raw_params),
    registries: Registries = Depends(get_registries),
) -> RequestContext:
    return build_request_context(resource, raw_params, registries.resources)


def get_job_queue(
    background_tasks: BackgroundTasks,
    registries: Registries = Depends(get_registries),
) -> JobQueue:
    runner = OperationJobRunner(registries.resources, registries.operations)
    return BackgroundJobQueue(background_tasks, runner)


def get_renderer(
    context: RequestContext = Depends(get_request_context),
    registries: Registries = Depends(get_registries),
) -> ResultRenderer:
    return ResultRenderer(PresenterResolver(registries.presenters, context.resource))


def get_action_templates(
    context: RequestContext = Depends(get_request_context),
    db: AsyncSession = Depends(get_db),
    renderer: ResultRenderer = Depends(get_renderer),
) -> ActionTemplates:
    return ActionTemplates(
        context, RecordLookup(db), RecordStore(db), renderer,
        show_view=get_settings().default_show_view,
    )


def get_operation_executor(
    context: RequestContext = Depends(get_request_context),
    db: AsyncSession = Depends(get_db),
    renderer: ResultRenderer = Depends(get_renderer),
    job_queue: JobQueue = Depends(get_job_queue),
) -> OperationExecutor:
    return OperationExecutor(
        context, RecordLookup(db), renderer, job_queue, db,
        queued_message=get_settings().operation_queued_message,
    )
