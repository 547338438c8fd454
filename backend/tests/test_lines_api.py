"""
StreetMap Backend — Line Endpoint Tests
=========================================

What:  End-to-end tests for /api/save-line, /api/get-lines and
       /api/delete-line/{id} against an in-memory SQLite database.
"""

import uuid

import pytest


POLYLINE = [{"lat": 1, "lng": 2}, {"lat": 3, "lng": 4}]


async def _lines(client):
    response = await client.get("/api/get-lines")
    assert response.status_code == 200
    return response.json()


class TestSaveLine:

    @pytest.mark.asyncio
    async def test_saved_line_is_listed(self, test_client):
        response = await test_client.post(
            "/api/save-line",
            json={"name": "Route 1", "polyline": POLYLINE, "color": "#000"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        line_id = body["id"]
        uuid.UUID(line_id)

        lines = await _lines(test_client)
        assert len(lines) == 1
        assert lines[0]["_id"] == line_id
        assert lines[0]["name"] == "Route 1"
        assert lines[0]["color"] == "#000"
        assert lines[0]["polyline"] == [{"lat": 1.0, "lng": 2.0}, {"lat": 3.0, "lng": 4.0}]

    @pytest.mark.asyncio
    async def test_name_is_optional(self, test_client):
        response = await test_client.post(
            "/api/save-line", json={"polyline": POLYLINE, "color": "#123456"}
        )

        assert response.status_code == 200
        assert (await _lines(test_client))[0]["name"] is None

    @pytest.mark.asyncio
    async def test_empty_polyline_is_accepted(self, test_client):
        response = await test_client.post(
            "/api/save-line", json={"name": "Empty", "polyline": [], "color": "#000"}
        )

        assert response.status_code == 200
        assert (await _lines(test_client))[0]["polyline"] == []

    @pytest.mark.asyncio
    async def test_missing_color_returns_400_and_creates_nothing(self, test_client):
        response = await test_client.post(
            "/api/save-line", json={"name": "No color", "polyline": POLYLINE}
        )

        assert response.status_code == 400
        assert response.json()["success"] is False
        assert await _lines(test_client) == []

    @pytest.mark.asyncio
    async def test_missing_polyline_returns_400(self, test_client):
        response = await test_client.post(
            "/api/save-line", json={"name": "No points", "color": "#000"}
        )

        assert response.status_code == 400
        assert "polyline" in response.json()["error"]
        assert await _lines(test_client) == []

    @pytest.mark.asyncio
    async def test_non_numeric_point_returns_400(self, test_client):
        response = await test_client.post(
            "/api/save-line",
            json={"polyline": [{"lat": "north", "lng": 2}], "color": "#000"},
        )

        assert response.status_code == 400
        assert await _lines(test_client) == []


class TestDeleteLine:

    @pytest.mark.asyncio
    async def test_delete_removes_line(self, test_client):
        saved = await test_client.post(
            "/api/save-line", json={"polyline": POLYLINE, "color": "#000"}
        )
        line_id = saved.json()["id"]

        response = await test_client.delete(f"/api/delete-line/{line_id}")

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert await _lines(test_client) == []

    @pytest.mark.asyncio
    async def test_delete_is_idempotent(self, test_client):
        saved = await test_client.post(
            "/api/save-line", json={"polyline": POLYLINE, "color": "#000"}
        )
        line_id = saved.json()["id"]

        first = await test_client.delete(f"/api/delete-line/{line_id}")
        second = await test_client.delete(f"/api/delete-line/{line_id}")
        unknown = await test_client.delete(f"/api/delete-line/{uuid.uuid4()}")

        for response in (first, second, unknown):
            assert response.status_code == 200
            assert response.json() == {"success": True}
