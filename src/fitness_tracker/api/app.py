"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fitness_tracker.api.errors import register_error_handlers
from fitness_tracker.api.extras import router as extras_router
from fitness_tracker.api.meals import router as meals_router
from fitness_tracker.api.profile import router as profile_router
from fitness_tracker.api.progress import router as progress_router
from fitness_tracker.api.workouts import router as workouts_router
from fitness_tracker.app_logging import configure_logging
from fitness_tracker.config import parse_allowed_origins
from fitness_tracker.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)
    allowed_origins = parse_allowed_origins(container.settings.cors_allowed_origins)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Fitness Tracker API starting",
            extra={"environment": container.settings.environment},
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Fitness Tracker API", lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials="*" not in allowed_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )
    register_error_handlers(app)

    app.include_router(workouts_router)
    app.include_router(meals_router)
    app.include_router(progress_router)
    app.include_router(extras_router)
    app.include_router(profile_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
