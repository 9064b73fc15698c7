"""Tests for health check endpoints."""

from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from pokedeck.db.database import get_session
from pokedeck.main import app
from pokedeck.models.db import Base


@pytest.fixture
async def async_engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def sql_client(async_engine):
    """Provide an async test client with overridden database session."""
    async_session = async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_session():
        async with async_session() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


async def get_with_broken_session(path: str, error: Exception):
    async def override_get_session_broken():
        mock_session = AsyncMock()
        mock_session.execute.side_effect = error
        yield mock_session

    app.dependency_overrides[get_session] = override_get_session_broken

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get(path)

    app.dependency_overrides.clear()
    return response


class TestHealthEndpoint:
    async def test_health_returns_healthy(self, client: AsyncClient) -> None:
        """Liveness check returns healthy."""
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "database": None}

    async def test_health_ignores_storage(self, client: AsyncClient, gateway) -> None:
        gateway.reachable = False

        response = await client.get("/health")

        assert response.status_code == 200


class TestReadyEndpoint:
    async def test_ready_returns_ready(self, sql_client: AsyncClient) -> None:
        """Readiness check returns ready when DB is connected."""
        response = await sql_client.get("/ready")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ready"
        assert data["database"] == "connected"

    async def test_ready_asks_the_gateway(self, client: AsyncClient, gateway) -> None:
        gateway.reachable = False

        response = await client.get("/ready")

        assert response.status_code == 503
        assert response.json() == {"status": "not ready", "database": "disconnected"}

    async def test_ready_returns_503_on_db_failure(self) -> None:
        """Readiness check returns 503 when DB is unavailable."""
        response = await get_with_broken_session(
            "/ready", OperationalError("SELECT 1", {}, Exception("Database connection failed"))
        )

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "not ready"
        assert data["database"] == "disconnected"

    async def test_ready_returns_503_on_refused_connection(self) -> None:
        response = await get_with_broken_session(
            "/ready", ConnectionRefusedError(111, "Connect call failed")
        )

        assert response.status_code == 503
        assert response.json()["database"] == "disconnected"


class TestUnreachableDatabase:
    async def test_list_reports_fetch_failure(self) -> None:
        """A refused connection maps to the list message, not a generic 500."""
        response = await get_with_broken_session(
            "/attacks", ConnectionRefusedError(111, "Connect call failed")
        )

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch attacks"}
