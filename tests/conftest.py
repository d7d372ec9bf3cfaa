"""Shared pytest fixtures: fake repositories, a seeded catalog and an API client on SQLite."""

from __future__ import annotations

import asyncio
import random
from collections.abc import AsyncGenerator, Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from fitmaster.core.enums import ExerciseType, MuscleGroup
from fitmaster.db.base import Base
from fitmaster.db.session import get_db
from fitmaster.main import create_application
from fitmaster.models import *  # noqa: F401, F403 - register all models
from fitmaster.services.generator import WorkoutGenerator
from tests.fakes import FakeExerciseRepository, FakeWorkoutRepository, make_exercise

TEST_EMAIL = "lifter@example.com"
TEST_PASSWORD = "correct-horse"


@pytest.fixture
def catalog():
    """Three chest (2 main, 1 isolation), four back (one per tier + extra main), one legs."""
    return [
        make_exercise("Bench press", MuscleGroup.CHEST, ExerciseType.MAIN),
        make_exercise("Weighted dips", MuscleGroup.CHEST, ExerciseType.MAIN),
        make_exercise("Cable fly", MuscleGroup.CHEST, ExerciseType.ISOLATION),
        make_exercise("Deadlift", MuscleGroup.BACK, ExerciseType.MAIN),
        make_exercise("Pull-ups", MuscleGroup.BACK, ExerciseType.MAIN),
        make_exercise("Seated row", MuscleGroup.BACK, ExerciseType.AUXILIARY),
        make_exercise("Band pull-apart", MuscleGroup.BACK, ExerciseType.ISOLATION),
        make_exercise("Squat", MuscleGroup.LEGS, ExerciseType.MAIN, sets=5, reps=5),
    ]


@pytest.fixture
def generator():
    return WorkoutGenerator(random.Random(1234))


@pytest.fixture
def exercise_repo(catalog):
    return FakeExerciseRepository(catalog)


@pytest.fixture
def workout_repo():
    return FakeWorkoutRepository()


# API


@pytest.fixture
def db_url(tmp_path) -> str:
    path = tmp_path / "fitmaster.db"
    sync_engine = create_engine(f"sqlite:///{path}")
    Base.metadata.create_all(sync_engine)
    sync_engine.dispose()
    return f"sqlite+aiosqlite:///{path}"


@pytest.fixture
def client(db_url) -> Iterator[TestClient]:
    engine = create_async_engine(db_url, poolclass=NullPool)
    session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app = create_application()
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    asyncio.run(engine.dispose())


@pytest.fixture
def auth_client(client) -> TestClient:
    """Client with a registered user and HTTP Basic credentials attached."""
    resp = client.post("/api/v1/users", json={"email": TEST_EMAIL, "password": TEST_PASSWORD})
    assert resp.status_code == 201, resp.text
    client.auth = (TEST_EMAIL, TEST_PASSWORD)
    return client
