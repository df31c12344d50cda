"""Movies API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Exactly one MovieStore per process, created in the lifespan, held on app.state
    - Global error handlers map MoviesError → status-only responses
    - CORS configured from settings (not hardcoded)

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - OpenAPI/docs routes disabled: /movies is the whole HTTP surface
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from movies_api.api.error_handlers import register_error_handlers
from movies_api.api.routes import movies
from movies_api.config import get_settings
from movies_api.core.movie_store import MovieStore
from movies_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.movie_store = MovieStore()
    logger.info(f"{settings.app_name} started")
    yield
    logger.info(
        f"{settings.app_name} shutting down",
        extra={"store_size": len(app.state.movie_store)},
    )


def create_app() -> FastAPI:
    """Build the FastAPI app with middleware, routes and error handlers."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name, version=settings.app_version,
        lifespan=lifespan,
        docs_url=None, redoc_url=None, openapi_url=None,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.include_router(movies.router)
    register_error_handlers(app)
    return app


app = create_app()
