"""Shared fixtures: in-memory SQLite database, services, fake clock and an API client."""

import uuid
from datetime import datetime, timedelta, timezone

import httpx
import pytest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from trainings.api.deps import get_auth_client
from trainings.core.security import AuthClient
from trainings.db.base import Base
from trainings.db.session import get_db
from trainings.models import GlobalTraining, GlobalTrainingExercise
from trainings.repositories.trainings import TrainingRepository
from trainings.schemas.training import TrainingCreate
from trainings.services import template_instantiation, training_lifecycle
from trainings.services.template_instantiation import TemplateInstantiationService
from trainings.services.time_accounting import TimeAccountingService
from trainings.services.trained_exercises import TrainedExerciseService
from trainings.services.training_lifecycle import TrainingLifecycleService

OWNER_ID = uuid.UUID("6f1c1d2e-3a4b-4c5d-8e9f-0a1b2c3d4e5f")
OTHER_USER_ID = uuid.UUID("0b7e2f51-9d3c-4a8e-b6f1-2c4d6e8fa0b3")

TOKENS = {
    "Bearer owner-token": OWNER_ID,
    "Bearer other-token": OTHER_USER_ID,
}


class FakeClock:
    """Stands in for trainings.core.clock.utcnow."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    # pysqlite/aiosqlite need their own BEGIN handling for SAVEPOINT support
    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def session(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
def repo(session):
    return TrainingRepository(session)


@pytest.fixture
def lifecycle(repo):
    return TrainingLifecycleService(repo)


@pytest.fixture
def exercises(repo):
    return TrainedExerciseService(repo)


@pytest.fixture
def accounting(repo):
    return TimeAccountingService(repo)


@pytest.fixture
def templates(repo):
    return TemplateInstantiationService(repo)


@pytest.fixture
def clock(monkeypatch):
    fake = FakeClock(datetime(2024, 3, 10, 9, 0, tzinfo=timezone.utc))
    monkeypatch.setattr(training_lifecycle, "utcnow", fake)
    monkeypatch.setattr(template_instantiation, "utcnow", fake)
    return fake


@pytest.fixture
def make_training(lifecycle):
    """Create a training for OWNER_ID; keyword args go into TrainingCreate."""

    async def _make(owner_id=OWNER_ID, **fields):
        fields.setdefault("title", "Leg day")
        fields.setdefault("planned_date", datetime(2024, 3, 10, 18, 0, tzinfo=timezone.utc))
        return await lifecycle.create(owner_id, TrainingCreate(**fields))

    return _make


@pytest.fixture
async def global_template(session_maker):
    """A committed template with exercises 7, 3, 11 in that order."""
    async with session_maker() as session:
        template = GlobalTraining(
            title="Push A",
            level="beginner",
            description="Chest, shoulders, triceps",
            exercises=[
                GlobalTrainingExercise(exercise_id=7, position=0),
                GlobalTrainingExercise(exercise_id=3, position=1),
                GlobalTrainingExercise(exercise_id=11, position=2),
            ],
        )
        session.add(template)
        await session.commit()
        return template.id


def auth_transport() -> httpx.MockTransport:
    """Fake auth service: known tokens resolve to a user id, anything else is 401."""

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/auth/v1/validate"
        user_id = TOKENS.get(request.headers.get("Authorization", ""))
        if user_id is None:
            return httpx.Response(401, json={"error": "invalid token"})
        return httpx.Response(200, json={"user_id": str(user_id)})

    return httpx.MockTransport(handler)


@pytest.fixture
async def client(session_maker):
    from trainings.main import create_application

    app = create_application()

    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except BaseException:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_auth_client] = lambda: AuthClient(
        "http://auth.test", transport=auth_transport()
    )

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(
        transport=transport,
        base_url="http://test",
        headers={"Authorization": "Bearer owner-token"},
    ) as ac:
        yield ac
