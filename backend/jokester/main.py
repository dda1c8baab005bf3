"""Jokester API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map JokesterError → structured JSON responses
    - CORS and session cookie configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event
    - Error handlers live in api/error_handlers.py
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jokester.api.error_handlers import register_error_handlers
from jokester.api.routes import health, jokes
from jokester.config import get_settings
from jokester.infrastructure.database import init_db
from jokester.infrastructure.identity import install_session_middleware
from jokester.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_schema:
        await manager.create_schema()
    logger.info("Jokester API started")
    yield
    await manager.dispose()
    logger.info("Jokester API shutting down")


app = FastAPI(title="Jokester API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
install_session_middleware(app, settings)

app.include_router(health.router)
app.include_router(jokes.router)

register_error_handlers(app)
