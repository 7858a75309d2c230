"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched for queued jobs that open their own session
    - job_log overrides the job queue with a recorder (nothing runs)

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - Background tasks run inside the httpx ASGI call, so DB state can be asserted
      after the response returns
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from crudkit.api.dependencies import get_job_queue
from crudkit.db.base import Base
from crudkit.infrastructure.database import get_db, DatabaseSessionManager
from crudkit.infrastructure.job_queue import QueuedJob, make_job
from crudkit.models.order import Order
from crudkit.models.user import User
import crudkit.infrastructure.database as db_module
from crudkit.main import app


class RecordingJobQueue:
    """Job queue that records instead of running."""

    def __init__(self):
        self.jobs: list[QueuedJob] = []

    def enqueue(self, operation, params):
        job = make_job(operation, params)
        self.jobs.append(job)
        return job


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def job_log(client):
    """Replace the job queue with a recorder; returns the recorder."""
    queue = RecordingJobQueue()
    app.dependency_overrides[get_job_queue] = lambda: queue
    return queue


@pytest.fixture
async def seed_user(test_db):
    user = User(name="Ada Lovelace", email="ada@example.com")
    test_db.add(user)
    await test_db.commit()
    await test_db.refresh(user)
    return user


@pytest.fixture
async def seed_order(test_db, seed_user):
    order = Order(user_id=seed_user.id, reference="R-1", total_cents=1250)
    test_db.add(order)
    await test_db.commit()
    await test_db.refresh(order)
    return order
