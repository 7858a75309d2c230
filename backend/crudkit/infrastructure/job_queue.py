"""Job Queue — hand-off point for out-of-request operation execution.

Invariants:
    - enqueue() returns immediately with a QueuedJob; it never waits for the job
    - Job params are a JSON round-trip copy of the caller's mapping: a job that
      cannot be serialized is rejected at enqueue time, and later mutation of
      the caller's dict cannot change the job
    - No retry, timeout or ordering guarantee across jobs

Design Decisions:
    - Protocol over ABC: any transport (Celery, RQ, arq) can be plugged in
      structurally (ADR: boundary protocols)
    - BackgroundJobQueue rides on FastAPI BackgroundTasks: runs after the
      response is sent, in-process (ADR: fire-and-forget, no dead-letter queue)
"""

import json
import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Protocol

from fastapi import BackgroundTasks

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueuedJob:
    """Serializable reference to a pending operation run."""
    operation: str
    params: dict[str, Any]
    job_id: str = field(default_factory=lambda: uuid.uuid4().hex)


class JobQueue(Protocol):
    """Contract for job transports."""
    def enqueue(self, operation: str, params: dict[str, Any]) -> QueuedJob: ...


JobRunner = Callable[[QueuedJob], Awaitable[None]]


def make_job(operation: str, params: dict[str, Any]) -> QueuedJob:
    return QueuedJob(operation=operation, params=json.loads(json.dumps(params)))


class BackgroundJobQueue:
    """Runs jobs via FastAPI BackgroundTasks after the response is sent."""

    def __init__(self, background_tasks: BackgroundTasks, runner: JobRunner):
        self._background_tasks = background_tasks
        self._runner = runner

    def enqueue(self, operation: str, params: dict[str, Any]) -> QueuedJob:
        job = make_job(operation, params)
        self._background_tasks.add_task(self._runner, job)
        logger.info(
            f"Queued operation {operation}",
            extra={"operation": operation, "job_id": job.job_id},
        )
        return job
