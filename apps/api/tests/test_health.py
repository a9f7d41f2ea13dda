"""
Tests for health endpoints and request tracing.
"""

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from fabtrack.api.dependencies import get_db
from fabtrack.core.config import settings
from fabtrack.main import app
from fabtrack.utils.health import check_database


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.environment,
    }


@pytest.mark.asyncio
async def test_request_id_is_echoed(client: AsyncClient):
    response = await client.get("/api/projects", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"


@pytest.mark.asyncio
async def test_request_id_is_generated(client: AsyncClient):
    response = await client.get("/api/projects")

    assert len(response.headers["X-Request-ID"]) == 32


@pytest.mark.asyncio
async def test_unknown_route_is_an_envelope(client: AsyncClient):
    response = await client.get("/api/unknown")

    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Not Found"}


@pytest.mark.asyncio
async def test_health_detailed_reports_database(client: AsyncClient):
    response = await client.get("/health/detailed")

    assert response.status_code == 200
    body = response.json()
    assert body["version"] == settings.app_version
    assert body["components"]["database"]["status"] in ("healthy", "degraded")
    assert body["components"]["database"]["latencyMs"] >= 0


@pytest.mark.asyncio
async def test_check_database_slow_is_degraded(db: AsyncSession):
    health = await check_database(db, slow_ms=0)

    assert health.status == "degraded"
    assert health.available


class BrokenSession:
    async def execute(self, statement):
        raise ConnectionRefusedError("connection refused")


@pytest.mark.asyncio
async def test_check_database_failure_is_unhealthy():
    health = await check_database(BrokenSession())

    assert health.status == "unhealthy"
    assert health.message == "connection refused"
    assert not health.available


@pytest.mark.asyncio
async def test_health_detailed_unavailable_database(client: AsyncClient):
    app.dependency_overrides[get_db] = lambda: BrokenSession()

    response = await client.get("/health/detailed")

    assert response.status_code == 503
    assert response.json()["status"] == "unhealthy"
