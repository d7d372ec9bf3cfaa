"""
FastAPI dependency providers.

Routers ask for repository protocols, the current user id and the shared
in-process services; tests override any of these through
app.dependency_overrides.
"""

from __future__ import annotations

import uuid

from fastapi import Depends, Request
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from fitmaster.core.config import Settings, get_settings
from fitmaster.core.errors import NotAuthenticatedError
from fitmaster.core.security import authenticate
from fitmaster.db.session import get_db
from fitmaster.repositories import (
    ExerciseRepository,
    SqlExerciseRepository,
    SqlUserRepository,
    SqlWorkoutRepository,
    UserRepository,
    WorkoutRepository,
)
from fitmaster.services.generator import WorkoutGenerator
from fitmaster.services.notifications import LogNotifier
from fitmaster.services.rest_timer import RestTimer
from fitmaster.services.session import ActiveSession
from fitmaster.services.session_registry import SessionRegistry

basic_auth = HTTPBasic(auto_error=False)


def get_exercise_repo(db: AsyncSession = Depends(get_db)) -> ExerciseRepository:
    return SqlExerciseRepository(db)


def get_workout_repo(db: AsyncSession = Depends(get_db)) -> WorkoutRepository:
    return SqlWorkoutRepository(db)


def get_user_repo(db: AsyncSession = Depends(get_db)) -> UserRepository:
    return SqlUserRepository(db)


async def get_current_user(
    credentials: HTTPBasicCredentials | None = Depends(basic_auth),
    users: UserRepository = Depends(get_user_repo),
) -> uuid.UUID:
    """User id for the request, or NotAuthenticatedError (answered with 401)."""
    if credentials is None:
        raise NotAuthenticatedError()
    user_id = authenticate(await users.get_by_email(credentials.username), credentials.password)
    if user_id is None:
        raise NotAuthenticatedError("Invalid email or password")
    return user_id


def get_generator(request: Request) -> WorkoutGenerator:
    return request.app.state.generator


def get_session_registry(request: Request) -> SessionRegistry:
    return request.app.state.session_registry


def new_active_session(settings: Settings = Depends(get_settings)) -> ActiveSession:
    timer = RestTimer(
        duration=settings.rest_timer_default_seconds,
        options=settings.rest_timer_options,
        notifier=LogNotifier(),
    )
    return ActiveSession(timer, autotick=True)
