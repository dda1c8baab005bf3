"""Health & Readiness Probes — liveness and jokes-store readiness endpoints.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the database is unreachable or the
      jokes table cannot be read (readiness)
    - A ready answer reports how many jokes the store holds

Design Decisions:
    - Readiness counts through SqlJokeRepository, the same query the random
      pick runs, so a missing migration shows up before traffic does
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from jokester.core.errors import DatabaseError
from jokester.infrastructure import database
from jokester.infrastructure.joke_repository import SqlJokeRepository

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


def _not_ready(reason: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason},
    )


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"status": "healthy", "service": "jokester-api"}


@router.get("/ready")
async def readiness_check():
    """Readiness probe — database connectivity, then the jokes table."""
    manager = database.db_manager
    if manager is None or not await manager.health_check():
        return _not_ready("database_unavailable")

    try:
        async with manager.session() as db:
            joke_count = await SqlJokeRepository(db).count()
    except DatabaseError as e:
        logger.error(f"Jokes table not readable: {e.message}")
        return _not_ready("jokes_table_unavailable")

    return {
        "status": "ready",
        "checks": {"database": "healthy", "jokes_table": "healthy"},
        "jokes": joke_count,
    }
