"""Liveness probe for load balancers and uptime checks."""

import logging
from datetime import UTC, datetime

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from fitzone.core.constants import Routes
from fitzone.core.deps import SessionDep

logger = logging.getLogger(__name__)

router = APIRouter(prefix=Routes.HEALTH.prefix, tags=[Routes.HEALTH.tag])


def _database_ok(session: SessionDep) -> bool:
    try:
        session.exec(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as exc:
        logger.error("Health probe could not reach the database: %s", exc)
        return False
    return True


@router.get("")
async def health(session: SessionDep):
    """Report that the API is up; 503 when the database does not answer."""
    body = {
        "status": "OK",
        "message": "FitZone API is running",
        "timestamp": datetime.now(UTC).isoformat(),
        "database": "ok",
    }
    if _database_ok(session):
        return body

    body.update(
        status="unhealthy", message="Database is unreachable", database="error"
    )
    return JSONResponse(status_code=503, content=body)
