"""Operation Executor — Result dispatch without HTTP.

Tests cover:
    - Default dispatch per PayloadKind (message, structure, record, both failures)
    - Explicit presenter applied to a structure payload
    - Continuations replace the default branch (sync and async)
    - perform_with() resolving continuations by renderer method name
    - perform_async() enqueues a copy of the params and acknowledges
    - Operations that return something other than a Result
"""

import json
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from fastapi.responses import JSONResponse

from crudkit.core.result import Failure, Success, success
from crudkit.infrastructure.job_queue import make_job
from crudkit.models.user import User
from crudkit.operations.base import Operation
from crudkit.presenters.registry import build_presenter_registry
from crudkit.presenters.user import UserEntity
from crudkit.services.operation_executor import OperationExecutor, QUEUED_MESSAGE
from crudkit.services.presenter_resolver import PresenterResolver
from crudkit.services.request_context import RequestContext
from crudkit.services.resource_registry import ResourceType
from crudkit.services.result_renderer import ResultRenderer


def _user(**overrides):
    fields = dict(
        id=7, name="Ada", email="ada@example.com", active=True,
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )
    fields.update(overrides)
    return User(**fields)


def _returning(value):
    class Returning(Operation):
        name = "returning"

        async def __call__(self, **input):
            return value

    return Returning


class ListQueue:
    def __init__(self):
        self.jobs = []

    def enqueue(self, operation, params):
        job = make_job(operation, params)
        self.jobs.append(job)
        return job


@pytest.fixture
def queue():
    return ListQueue()


@pytest.fixture
def executor(queue):
    context = RequestContext(
        resource=ResourceType("users", User), params={"id": "7", "note": "hi"},
    )
    renderer = ResultRenderer(
        PresenterResolver(build_presenter_registry(), context.resource),
    )
    return OperationExecutor(context, MagicMock(), renderer, queue, MagicMock())


def _body(response):
    return json.loads(response.body)


# ─── Default dispatch ───────────────────────────────────────────


async def test_success_message_renders_message(executor):
    res = await executor.perform(_returning(Success.message("done")), input={})
    assert res.status_code == 200
    assert _body(res) == {"message": "done"}


async def test_success_structure_renders_raw(executor):
    res = await executor.perform(
        _returning(Success.structure({"total": 3})), input={},
    )
    assert _body(res) == {"total": 3}


async def test_success_structure_with_presenter_is_presented(executor):
    payload = {"id": 1, "name": "Grace"}
    res = await executor.perform(
        _returning(Success.structure(payload)), input={}, presenter=UserEntity,
    )
    assert _body(res) == {"id": 1, "name": "Grace"}


async def test_success_record_uses_context_presenter(executor):
    res = await executor.perform(_returning(Success.record(_user())), input={})
    assert _body(res) == {"id": 7, "name": "Ada"}


async def test_success_record_with_view(executor):
    res = await executor.perform(
        _returning(Success.record(_user())), input={}, view="full",
    )
    assert _body(res)["email"] == "ada@example.com"


async def test_success_record_collection(executor):
    users = [_user(id=1, name="A"), _user(id=2, name="B")]
    res = await executor.perform(_returning(Success.record(users)), input={})
    assert _body(res) == [{"id": 1, "name": "A"}, {"id": 2, "name": "B"}]


async def test_classified_record_list_is_presented(executor):
    users = [_user(id=1, name="A")]
    res = await executor.perform(_returning(success(users)), input={})
    assert _body(res) == [{"id": 1, "name": "A"}]


async def test_failure_message_renders_error(executor):
    res = await executor.perform(_returning(Failure.message("nope")), input={})
    assert res.status_code == 400
    assert _body(res) == {"error": "nope"}


async def test_failure_record_renders_sentence(executor):
    user = _user()
    user.errors.add("name", "can't be blank")
    user.errors.add("email", "is invalid")
    res = await executor.perform(_returning(Failure.invalid(user)), input={})
    assert res.status_code == 400
    assert _body(res) == {"error": "Name can't be blank and Email is invalid"}


async def test_non_result_raises_type_error(executor):
    with pytest.raises(TypeError):
        await executor.perform(_returning({"raw": True}), input={})


# ─── Continuations ──────────────────────────────────────────────


async def test_on_success_receives_raw_payload(executor):
    seen = []

    def on_success(value):
        seen.append(value)
        return JSONResponse({"custom": value})

    res = await executor.perform(
        _returning(Success.message("done")), input={}, on_success=on_success,
    )
    assert seen == ["done"]
    assert _body(res) == {"custom": "done"}


async def test_async_on_failure_is_awaited(executor):
    async def on_failure(error):
        return JSONResponse({"handled": error}, status_code=409)

    res = await executor.perform(
        _returning(Failure.message("clash")), input={}, on_failure=on_failure,
    )
    assert res.status_code == 409
    assert _body(res) == {"handled": "clash"}


async def test_unused_continuation_keeps_default_branch(executor):
    res = await executor.perform(
        _returning(Failure.message("nope")), input={},
        on_success=lambda value: JSONResponse({"never": True}),
    )
    assert _body(res) == {"error": "nope"}


async def test_perform_with_renderer_method_names(executor):
    res = await executor.perform_with(
        _returning(Success.message("done")), input={},
        success="render_message", failure="render_error",
    )
    assert _body(res) == {"message": "done"}


async def test_perform_with_unknown_method_name(executor):
    with pytest.raises(ValueError):
        await executor.perform_with(
            _returning(Success.message("done")), input={}, success="render_nothing",
        )


# ─── Async ──────────────────────────────────────────────────────


def test_perform_async_enqueues_context_params(executor, queue):
    res = executor.perform_async(_returning(Success.message("done")))
    assert _body(res) == {"message": QUEUED_MESSAGE}
    assert queue.jobs[0].operation == "returning"
    assert queue.jobs[0].params == {"id": "7", "note": "hi"}


def test_perform_async_copies_explicit_input(executor, queue):
    params = {"tags": ["a"]}
    executor.perform_async(_returning(Success.message("done")), input=params)
    params["tags"].append("b")
    assert queue.jobs[0].params == {"tags": ["a"]}
