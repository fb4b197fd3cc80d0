"""Board Game Reviews API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure → {"msg": ...} JSON
    - CORS configured from settings (not hardcoded)
    - Database engine acquired in the lifespan, stored on app.state, disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - OpenAPI docs live under /api so every non-/api path is "Invalid URL"
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from game_reviews.api.error_handlers import register_error_handlers
from game_reviews.api.routes import categories, comments, health, reviews, users
from game_reviews.config import get_settings
from game_reviews.infrastructure.database import open_database
from game_reviews.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    async with open_database(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    ) as db_manager:
        app.state.db_manager = db_manager
        logger.info("Board game reviews API started")
        yield
        logger.info("Board game reviews API shutting down")
        app.state.db_manager = None


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title="Board Game Reviews API",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/api/docs",
        redoc_url=None,
        openapi_url="/api/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(categories.router)
    app.include_router(reviews.router)
    app.include_router(comments.router)
    app.include_router(users.router)

    register_error_handlers(app)
    return app


app = create_app()
