"""Tests for line CRUD endpoints."""

from uuid import uuid4

import pytest
from httpx import AsyncClient


async def create_test_station(client: AsyncClient, name: str) -> str:
    """Helper to create a station and return its ID."""
    response = await client.post("/stations", json={"name": name})
    assert response.status_code == 201
    return response.json()["id"]


def line_params(up_station_id: str, down_station_id: str, **overrides) -> dict:
    params = {
        "name": "Shinbundang",
        "color": "bg-red-600",
        "up_station_id": up_station_id,
        "down_station_id": down_station_id,
        "distance": 100,
    }
    params.update(overrides)
    return params


@pytest.fixture
async def stations(client: AsyncClient) -> dict[str, str]:
    return {
        name: await create_test_station(client, name)
        for name in ("Gangnam", "Yangjae", "Jeongja")
    }


class TestCreateLine:
    """Tests for POST /lines endpoint."""

    @pytest.mark.asyncio
    async def test_create_line_success(self, client: AsyncClient, stations):
        response = await client.post(
            "/lines", json=line_params(stations["Gangnam"], stations["Yangjae"])
        )
        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Shinbundang"
        assert data["color"] == "bg-red-600"
        assert data["distance"] == 100
        assert [s["id"] for s in data["stations"]] == [stations["Gangnam"], stations["Yangjae"]]

    @pytest.mark.asyncio
    async def test_create_line_unknown_station(self, client: AsyncClient, stations):
        response = await client.post(
            "/lines", json=line_params(stations["Gangnam"], str(uuid4()))
        )
        assert response.status_code == 404

    @pytest.mark.asyncio
    @pytest.mark.parametrize("distance", [0, -5])
    async def test_create_line_invalid_distance(self, client: AsyncClient, stations, distance):
        response = await client.post(
            "/lines",
            json=line_params(stations["Gangnam"], stations["Yangjae"], distance=distance),
        )
        assert response.status_code == 400
        assert response.json()["error_type"] == "InvalidDistanceError"

    @pytest.mark.asyncio
    async def test_create_line_same_stations(self, client: AsyncClient, stations):
        response = await client.post(
            "/lines", json=line_params(stations["Gangnam"], stations["Gangnam"])
        )
        assert response.status_code == 409

    @pytest.mark.asyncio
    async def test_create_line_duplicate_name(self, client: AsyncClient, stations):
        await client.post("/lines", json=line_params(stations["Gangnam"], stations["Yangjae"]))
        response = await client.post(
            "/lines", json=line_params(stations["Yangjae"], stations["Jeongja"])
        )
        assert response.status_code == 409


class TestListLines:
    """Tests for GET /lines endpoint."""

    @pytest.mark.asyncio
    async def test_list_lines_empty(self, client: AsyncClient):
        response = await client.get("/lines")
        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_list_lines_returns_created(self, client: AsyncClient, stations):
        await client.post(
            "/lines", json=line_params(stations["Gangnam"], stations["Yangjae"], name="Line 2")
        )
        await client.post(
            "/lines", json=line_params(stations["Yangjae"], stations["Jeongja"], name="Line 1")
        )

        response = await client.get("/lines")
        assert response.status_code == 200
        assert [line["name"] for line in response.json()] == ["Line 1", "Line 2"]


class TestGetLine:
    """Tests for GET /lines/{line_id} endpoint."""

    @pytest.mark.asyncio
    async def test_get_line(self, client: AsyncClient, stations):
        created = await client.post(
            "/lines", json=line_params(stations["Gangnam"], stations["Yangjae"])
        )
        line_id = created.json()["id"]

        response = await client.get(f"/lines/{line_id}")
        assert response.status_code == 200
        assert response.json()["id"] == line_id

    @pytest.mark.asyncio
    async def test_get_line_not_found(self, client: AsyncClient):
        response = await client.get(f"/lines/{uuid4()}")
        assert response.status_code == 404


class TestUpdateLine:
    """Tests for PATCH /lines/{line_id} endpoint."""

    @pytest.mark.asyncio
    async def test_update_line(self, client: AsyncClient, stations):
        created = await client.post(
            "/lines", json=line_params(stations["Gangnam"], stations["Yangjae"])
        )
        line_id = created.json()["id"]

        response = await client.patch(
            f"/lines/{line_id}", json={"name": "Line 2", "color": "bg-green-600"}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Line 2"
        assert data["color"] == "bg-green-600"
        assert len(data["stations"]) == 2

    @pytest.mark.asyncio
    async def test_update_line_not_found(self, client: AsyncClient):
        response = await client.patch(f"/lines/{uuid4()}", json={"name": "Nope"})
        assert response.status_code == 404


class TestDeleteLine:
    """Tests for DELETE /lines/{line_id} endpoint."""

    @pytest.mark.asyncio
    async def test_delete_line(self, client: AsyncClient, stations):
        created = await client.post(
            "/lines", json=line_params(stations["Gangnam"], stations["Yangjae"])
        )
        line_id = created.json()["id"]

        response = await client.delete(f"/lines/{line_id}")
        assert response.status_code == 204

        response = await client.get(f"/lines/{line_id}")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_line_frees_its_stations(self, client: AsyncClient, stations):
        """Deleting a line cascades to its sections."""
        created = await client.post(
            "/lines", json=line_params(stations["Gangnam"], stations["Yangjae"])
        )
        await client.delete(f"/lines/{created.json()['id']}")

        response = await client.delete(f"/stations/{stations['Gangnam']}")
        assert response.status_code == 204

    @pytest.mark.asyncio
    async def test_delete_line_not_found(self, client: AsyncClient):
        response = await client.delete(f"/lines/{uuid4()}")
        assert response.status_code == 404
