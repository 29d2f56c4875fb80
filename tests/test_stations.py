"""Tests for station CRUD endpoints."""

from uuid import uuid4

import pytest
from httpx import AsyncClient


async def create_test_station(client: AsyncClient, name: str) -> str:
    """Helper to create a station and return its ID."""
    response = await client.post("/stations", json={"name": name})
    assert response.status_code == 201
    return response.json()["id"]


class TestCreateStation:
    """Tests for POST /stations endpoint."""

    @pytest.mark.asyncio
    async def test_create_station_success(self, client: AsyncClient):
        """Create station should return 201 with station data."""
        response = await client.post("/stations", json={"name": "Gangnam"})
        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Gangnam"
        assert "id" in data
        assert "created_at" in data
        assert "updated_at" in data

    @pytest.mark.asyncio
    async def test_create_station_requires_name(self, client: AsyncClient):
        """Create station with an empty name should fail validation."""
        response = await client.post("/stations", json={"name": ""})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_create_station_duplicate_name(self, client: AsyncClient):
        """Station names are unique."""
        await create_test_station(client, "Gangnam")
        response = await client.post("/stations", json={"name": "Gangnam"})
        assert response.status_code == 409
        assert response.json()["error_type"] == "IntegrityError"


class TestListStations:
    """Tests for GET /stations endpoint."""

    @pytest.mark.asyncio
    async def test_list_stations_empty(self, client: AsyncClient):
        response = await client.get("/stations")
        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_list_stations_returns_created(self, client: AsyncClient):
        await create_test_station(client, "Yangjae")
        await create_test_station(client, "Gangnam")

        response = await client.get("/stations")
        assert response.status_code == 200
        names = [s["name"] for s in response.json()]
        assert names == ["Gangnam", "Yangjae"]


class TestGetStation:
    """Tests for GET /stations/{station_id} endpoint."""

    @pytest.mark.asyncio
    async def test_get_station(self, client: AsyncClient):
        station_id = await create_test_station(client, "Gangnam")
        response = await client.get(f"/stations/{station_id}")
        assert response.status_code == 200
        assert response.json()["name"] == "Gangnam"

    @pytest.mark.asyncio
    async def test_get_station_not_found(self, client: AsyncClient):
        response = await client.get(f"/stations/{uuid4()}")
        assert response.status_code == 404


class TestDeleteStation:
    """Tests for DELETE /stations/{station_id} endpoint."""

    @pytest.mark.asyncio
    async def test_delete_station(self, client: AsyncClient):
        station_id = await create_test_station(client, "Gangnam")
        response = await client.delete(f"/stations/{station_id}")
        assert response.status_code == 204

        response = await client.get(f"/stations/{station_id}")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_station_not_found(self, client: AsyncClient):
        response = await client.delete(f"/stations/{uuid4()}")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_station_on_line_conflicts(self, client: AsyncClient):
        """A station used by a line section cannot be deleted."""
        up_id = await create_test_station(client, "Gangnam")
        down_id = await create_test_station(client, "Yangjae")
        response = await client.post(
            "/lines",
            json={
                "name": "Shinbundang",
                "color": "bg-red-600",
                "up_station_id": up_id,
                "down_station_id": down_id,
                "distance": 10,
            },
        )
        assert response.status_code == 201

        response = await client.delete(f"/stations/{down_id}")
        assert response.status_code == 409
