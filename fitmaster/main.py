"""FastAPI application factory and lifespan."""

import logging
import random
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fitmaster.api.v1 import api_router
from fitmaster.core.config import Settings, get_settings
from fitmaster.core.errors import (
    NotAuthenticatedError,
    NotFoundError,
    SessionStateError,
    StoreError,
)
from fitmaster.core.logging import configure_logging
from fitmaster.db.session import engine
from fitmaster.services.generator import WorkoutGenerator
from fitmaster.services.session_registry import SessionRegistry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Shutdown: stop live session timers and dispose of the engine."""
    yield
    app.state.session_registry.close_all()
    await engine.dispose()


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(NotAuthenticatedError)
    async def not_authenticated(request: Request, exc: NotAuthenticatedError):
        return JSONResponse(
            status_code=401,
            content={"detail": str(exc)},
            headers={"WWW-Authenticate": "Basic"},
        )

    @app.exception_handler(NotFoundError)
    async def not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(SessionStateError)
    async def session_state(request: Request, exc: SessionStateError):
        return JSONResponse(status_code=409, content={"detail": str(exc)})

    @app.exception_handler(StoreError)
    async def store_failure(request: Request, exc: StoreError):
        # Already logged by the repository; the client may retry the same action.
        return JSONResponse(status_code=503, content={"detail": str(exc)})


def create_application(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.generator = WorkoutGenerator(random.Random())
    app.state.session_registry = SessionRegistry(
        idle_timeout=settings.session_idle_timeout_seconds or None
    )

    # CORS: everything in debug, localhost in development, CORS_ORIGINS otherwise
    if settings.debug:
        cors_origins = ["*"]
    elif settings.environment == "development":
        cors_origins = ["http://localhost:3000", "http://127.0.0.1:3000", "http://localhost:5173"]
    else:
        cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    _register_error_handlers(app)

    @app.get("/")
    def root():
        return {"status": "ok", "message": settings.app_name}

    app.include_router(api_router, prefix=settings.api_v1_prefix)
    logger.info("FitMaster API configured (%s)", settings.environment)
    return app


app = create_application()
