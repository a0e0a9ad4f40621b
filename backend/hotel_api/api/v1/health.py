"""Health check endpoints."""

import logging
from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from hotel_api.api import deps
from hotel_api.core.config import get_settings

logger = logging.getLogger(__name__)

router = APIRouter()


async def _database_reachable(sessionmaker: async_sessionmaker[AsyncSession]) -> bool:
    try:
        async with sessionmaker() as session:
            await session.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.warning("Report database is unreachable", exc_info=True)
        return False
    return True


@router.get("", summary="Service health status")
async def healthcheck(
    response: Response,
    sessionmaker: Annotated[
        async_sessionmaker[AsyncSession], Depends(deps.get_report_sessionmaker)
    ],
) -> dict[str, str]:
    """Return application health metadata and report database reachability.

    Responds 503 when the report database cannot be queried.
    """
    settings = get_settings()
    database_ok = await _database_reachable(sessionmaker)
    if not database_ok:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return {
        "status": "ok" if database_ok else "degraded",
        "database": "ok" if database_ok else "unavailable",
        "service": settings.app_name,
        "timestamp": datetime.now(UTC).isoformat(),
        "environment": settings.app_env,
    }
