"""API v1 router aggregation."""

from fastapi import APIRouter

from fitmaster.api.v1.endpoints import (
    exercises,
    generator,
    health,
    session,
    stats,
    users,
    workouts,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(exercises.router, prefix="/exercises", tags=["exercises"])
api_router.include_router(workouts.router, prefix="/workouts", tags=["workouts"])
api_router.include_router(generator.router, prefix="/generator", tags=["generator"])
api_router.include_router(session.router, prefix="/session", tags=["session"])
api_router.include_router(stats.router, prefix="/stats", tags=["stats"])
