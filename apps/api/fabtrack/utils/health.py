"""Readiness probe for the database."""

import time
from dataclasses import dataclass
from typing import Optional

import structlog
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

logger = structlog.get_logger()

SLOW_QUERY_MS = 100.0


@dataclass(frozen=True)
class DatabaseHealth:
    status: str
    latency_ms: Optional[float] = None
    message: Optional[str] = None

    @property
    def available(self) -> bool:
        return self.status != "unhealthy"

    def to_dict(self) -> dict:
        return {
            "status": self.status,
            "latencyMs": self.latency_ms,
            "message": self.message,
        }


async def check_database(db: AsyncSession, slow_ms: float = SLOW_QUERY_MS) -> DatabaseHealth:
    """
    Time a ``SELECT 1`` on the request session.

    ``degraded`` when the round trip reaches ``slow_ms``, ``unhealthy`` when
    the query fails.
    """
    started = time.perf_counter()
    try:
        await db.execute(text("SELECT 1"))
    except Exception as exc:
        logger.error("health.database_unreachable", error=str(exc))
        return DatabaseHealth(status="unhealthy", message=str(exc)[:100])

    latency = round((time.perf_counter() - started) * 1000, 2)
    if latency >= slow_ms:
        logger.warning("health.database_slow", latency_ms=latency)
        return DatabaseHealth(status="degraded", latency_ms=latency)
    return DatabaseHealth(status="healthy", latency_ms=latency)
