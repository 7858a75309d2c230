"""Operation Executor — run an operation and turn its Result into a response.

Invariants:
    - perform(): default dispatch on the Result's PayloadKind
        Success MESSAGE              -> {"message": ...}
        Success STRUCTURE, no presenter -> raw JSON
        Success otherwise            -> presenter output
        Failure MESSAGE              -> {"error": ...} (400)
        Failure RECORD               -> field errors as one sentence (400)
    - Custom on_success / on_failure fully replace the default branch and get the
      raw payload
    - perform_async() enqueues (operation name, params) and acknowledges at once;
      it never sees the Result
    - Operation failures never become exceptions here

Design Decisions:
    - match/case on Success/Failure with the kind tag: exhaustive branching on
      data, not isinstance checks on the payload
"""

import inspect
import logging
from typing import Any, Callable

from fastapi.responses import JSONResponse, Response
from sqlalchemy.ext.asyncio import AsyncSession

from crudkit.core.result import Failure, PayloadKind, Result, Success
from crudkit.infrastructure.job_queue import JobQueue
from crudkit.operations.base import Operation
from crudkit.services.input_extractor import derive_operation_input
from crudkit.services.presenter_resolver import PresenterRef
from crudkit.services.record_lookup import RecordLookup
from crudkit.services.request_context import RequestContext
from crudkit.services.result_renderer import ResultRenderer

logger = logging.getLogger(__name__)

QUEUED_MESSAGE = "Operation queued."

Continuation = Callable[[Any], Any] | str


class OperationExecutor:
    def __init__(
        self,
        context: RequestContext,
        lookup: RecordLookup,
        renderer: ResultRenderer,
        job_queue: JobQueue,
        db: AsyncSession,
        queued_message: str = QUEUED_MESSAGE,
    ):
        self._context = context
        self._lookup = lookup
        self._renderer = renderer
        self._job_queue = job_queue
        self._db = db
        self._queued_message = queued_message

    async def operation_input(self, operation_cls: type[Operation]) -> dict[str, Any]:
        return await derive_operation_input(
            self._context.action_params(),
            operation_cls.input_shape,
            operation_cls.name,
            self._lookup,
            self._context.resource,
        )

    async def run(
        self, operation_cls: type[Operation], input: dict[str, Any] | None = None,
    ) -> Result:
        if input is None:
            input = await self.operation_input(operation_cls)
        result = await operation_cls(self._db)(**input)
        if not isinstance(result, (Success, Failure)):
            raise TypeError(f"Operation {operation_cls.name} did not return a Result")
        logger.info(
            f"Operation {operation_cls.name} -> {'success' if result.ok else 'failure'}",
            extra={
                "operation": operation_cls.name,
                "resource": self._context.resource.name,
            },
        )
        return result

    async def perform(
        self,
        operation_cls: type[Operation],
        input: dict[str, Any] | None = None,
        presenter: PresenterRef | None = None,
        view: str | None = None,
        on_success: Callable[[Any], Any] | None = None,
        on_failure: Callable[[Any], Any] | None = None,
    ) -> Response:
        result = await self.run(operation_cls, input)

        match result:
            case Success(value=value) if on_success is not None:
                return await _call(on_success, value)
            case Failure(error=error) if on_failure is not None:
                return await _call(on_failure, error)
            case Success(value=value, kind=PayloadKind.MESSAGE):
                return self._renderer.render_message(value)
            case Success(value=value, kind=PayloadKind.STRUCTURE) if presenter is None:
                return self._renderer.render_json(value)
            case Success(value=value):
                return self._renderer.render_record(value, presenter, view)
            case Failure(error=error, kind=PayloadKind.MESSAGE):
                return self._renderer.render_error(error)
            case Failure(error=error):
                return self._renderer.render_validation_errors(error)

    async def perform_with(
        self,
        operation_cls: type[Operation],
        input: dict[str, Any] | None = None,
        success: Continuation = "render_record",
        failure: Continuation = "render_validation_errors",
    ) -> Response:
        """Like perform(), with continuations given as renderer method names or callables."""
        on_success = self._continuation(success)
        on_failure = self._continuation(failure)
        result = await self.run(operation_cls, input)
        if isinstance(result, Success):
            return await _call(on_success, result.value)
        return await _call(on_failure, result.error)

    def perform_async(
        self, operation_cls: type[Operation], input: dict[str, Any] | None = None,
    ) -> JSONResponse:
        if input is None:
            input = self._context.action_params()
        self._job_queue.enqueue(operation_cls.name, input)
        return self._renderer.render_message(self._queued_message)

    def _continuation(self, continuation: Continuation) -> Callable[[Any], Any]:
        if callable(continuation):
            return continuation
        method = getattr(self._renderer, continuation, None)
        if method is None or not callable(method):
            raise ValueError(f"ResultRenderer has no method '{continuation}'")
        return method


async def _call(continuation: Callable[[Any], Any], payload: Any) -> Any:
    response = continuation(payload)
    if inspect.isawaitable(response):
        response = await response
    return response
