"""
StreetMap Backend — Health & Backend-Outage Tests
===================================================

What:  /health reporting, and the behavior of the data endpoints when the
       database cannot be reached (every call fails with a 500 body).
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from streetmap.config import Settings
from streetmap.database import build_engine
from streetmap.main import create_app

UNREACHABLE_URL = "sqlite+aiosqlite:////nonexistent-dir/streetmap/missing.db"


@pytest_asyncio.fixture
async def offline_client():
    settings = Settings(database_url=UNREACHABLE_URL, log_level="WARNING")
    engine = build_engine(settings)
    app = create_app(settings, engine=engine)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    await engine.dispose()


class TestHealth:

    @pytest.mark.asyncio
    async def test_healthy_when_database_reachable(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"

    @pytest.mark.asyncio
    async def test_unhealthy_when_database_unreachable(self, offline_client):
        response = await offline_client.get("/health")

        assert response.status_code == 503
        assert response.json()["database"] == "disconnected"


class TestBackendOutage:

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method, path, body",
        [
            ("GET", "/streets", None),
            ("POST", "/streets", {"name": "x"}),
            ("GET", "/api/get-lines", None),
            ("POST", "/api/save-line", {"polyline": [], "color": "#000"}),
            ("POST", "/api/update-color",
             {"id": "0b7e7f0e-6a7e-4a43-9a55-2f4f1d6c1a11", "color": "#fff"}),
            ("DELETE", "/streets/0b7e7f0e-6a7e-4a43-9a55-2f4f1d6c1a11", None),
            ("DELETE", "/api/delete-line/0b7e7f0e-6a7e-4a43-9a55-2f4f1d6c1a11", None),
        ],
    )
    async def test_storage_failure_returns_500(self, offline_client, method, path, body):
        response = await offline_client.request(method, path, json=body)

        assert response.status_code == 500
        assert response.json()["success"] is False
        assert response.json()["error"] == "Server error"

    @pytest.mark.asyncio
    async def test_presence_checks_still_answer_400(self, offline_client):
        response = await offline_client.post("/api/save-line", json={"polyline": []})

        assert response.status_code == 400


class TestStartupWithDatabaseDown:

    @pytest.mark.asyncio
    async def test_lifespan_survives_unreachable_database(self):
        settings = Settings(database_url=UNREACHABLE_URL, log_level="WARNING")
        app = create_app(settings, engine=build_engine(settings))

        # Startup must not raise; requests afterwards fail as storage errors
        async with app.router.lifespan_context(app):
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                response = await client.get("/streets")

        assert response.status_code == 500
        assert response.json()["success"] is False
        assert response.json()["error"] == "Server error"
