"""
Integration tests for the ability estimation API.

Uses httpx.AsyncClient + ASGITransport for in-process HTTP round-trips.
"""

import pytest
from httpx import ASGITransport, AsyncClient

from ability_service.api.app import create_app
from ability_service.api.config import ApiSettings
from ability_service.core.data_models import ItemResponse
from ability_service.irt import estimate_ability

SMALL_SETTINGS = ApiSettings(max_responses=100, max_abilities=100)


def _make_client(settings: ApiSettings = SMALL_SETTINGS) -> AsyncClient:
    app = create_app(settings=settings)
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://testserver")


class TestHealthCheck:
    @pytest.mark.asyncio
    async def test_health(self) -> None:
        async with _make_client() as client:
            resp = await client.get("/api/v1/health")
            assert resp.status_code == 200
            data = resp.json()
            assert data["status"] == "ok"
            assert "version" in data

    @pytest.mark.asyncio
    async def test_request_id_echoed(self) -> None:
        async with _make_client() as client:
            resp = await client.get(
                "/api/v1/health", headers={"X-Request-ID": "abc123"}
            )
            assert resp.headers["X-Request-ID"] == "abc123"

    @pytest.mark.asyncio
    async def test_request_id_generated(self) -> None:
        async with _make_client() as client:
            resp = await client.get("/api/v1/health")
            assert len(resp.headers["X-Request-ID"]) == 12


class TestEstimateAbility:
    @pytest.mark.asyncio
    async def test_matches_library(self) -> None:
        payload = {
            "responses": [
                {"is_correct": True, "difficulty": 0.0},
                {"is_correct": False, "difficulty": 0.0},
                {"is_correct": True, "difficulty_label": "hard"},
                {"is_correct": False, "difficulty_label": "easy"},
            ],
            "initial_ability": 0.0,
        }
        expected = estimate_ability(
            [
                ItemResponse(is_correct=True, difficulty=0.0),
                ItemResponse(is_correct=False, difficulty=0.0),
                ItemResponse(is_correct=True, difficulty=1.0),
                ItemResponse(is_correct=False, difficulty=-1.0),
            ],
            0.0,
        )
        async with _make_client() as client:
            resp = await client.post("/api/v1/ability", json=payload)
            assert resp.status_code == 200
            data = resp.json()
            assert data["estimate"]["theta"] == pytest.approx(expected)
            assert data["next_difficulty"] in ("easy", "medium", "hard")

    @pytest.mark.asyncio
    async def test_empty_responses(self) -> None:
        async with _make_client() as client:
            resp = await client.post(
                "/api/v1/ability",
                json={"responses": [], "initial_ability": 0.0},
            )
            assert resp.status_code == 200
            data = resp.json()
            assert data["estimate"]["theta"] == 0.0
            assert data["estimate"]["convergence_status"] == "no_data"
            assert data["next_difficulty"] == "medium"

    @pytest.mark.asyncio
    async def test_oversized_request(self) -> None:
        settings = ApiSettings(max_responses=2)
        payload = {
            "responses": [{"is_correct": True, "difficulty": 0.0}] * 3,
        }
        async with _make_client(settings) as client:
            resp = await client.post("/api/v1/ability", json=payload)
            assert resp.status_code == 422
            data = resp.json()
            assert data["code"] == "DATA_SIZE_EXCEEDED"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("initial_ability", [1000.0, -3.5])
    async def test_initial_ability_outside_scale_rejected(
        self, initial_ability: float
    ) -> None:
        payload = {
            "responses": [{"is_correct": False, "difficulty": 0.0}],
            "initial_ability": initial_ability,
        }
        async with _make_client() as client:
            resp = await client.post("/api/v1/ability", json=payload)
            assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_invalid_guessing_rejected(self) -> None:
        payload = {
            "responses": [
                {"is_correct": True, "difficulty": 0.0, "guessing": 1.0}
            ],
        }
        async with _make_client() as client:
            resp = await client.post("/api/v1/ability", json=payload)
            assert resp.status_code == 422


class TestProbability:
    @pytest.mark.asyncio
    async def test_probabilities(self) -> None:
        payload = {
            "abilities": [-50.0, 0.0, 50.0],
            "difficulty": 0.0,
            "discrimination": 1.0,
            "guessing": 0.25,
        }
        async with _make_client() as client:
            resp = await client.post("/api/v1/probability", json=payload)
            assert resp.status_code == 200
            probs = resp.json()["probabilities"]
            assert probs[0] == pytest.approx(0.25, abs=1e-6)
            assert probs[1] == pytest.approx(0.625)
            assert probs[2] == pytest.approx(1.0, abs=1e-6)


class TestScales:
    @pytest.mark.asyncio
    async def test_normalize(self) -> None:
        async with _make_client() as client:
            resp = await client.post(
                "/api/v1/scale/normalize", json={"theta": 0.0}
            )
            assert resp.status_code == 200
            assert resp.json() == {"theta": 0.0, "normalized": 0.5}

    @pytest.mark.asyncio
    async def test_denormalize(self) -> None:
        async with _make_client() as client:
            resp = await client.post(
                "/api/v1/scale/denormalize", json={"normalized": 0.5}
            )
            assert resp.status_code == 200
            assert resp.json()["theta"] == 0.0

    @pytest.mark.asyncio
    async def test_denormalize_boundary_rejected(self) -> None:
        async with _make_client() as client:
            resp = await client.post(
                "/api/v1/scale/denormalize", json={"normalized": 1.0}
            )
            assert resp.status_code == 422
            assert resp.json()["code"] == "INVALID_PARAMETER"

    @pytest.mark.asyncio
    async def test_difficulty_label(self) -> None:
        async with _make_client() as client:
            resp = await client.get("/api/v1/difficulty/hard")
            assert resp.json() == {"label": "hard", "difficulty": 1.0}

            resp = await client.get("/api/v1/difficulty/unknown")
            assert resp.json()["difficulty"] == 0.0
