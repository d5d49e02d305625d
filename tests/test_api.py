"""Tests for the HTTP surface: /chunk-preview, /strategies and /health."""

import time
from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

import chunk_preview.controllers.routes.chunk as chunk_route
import chunk_preview.services.chunking.chunker as chunker_module
from chunk_preview.config.settings import Settings
from chunk_preview.main import app

ZERO_METRICS = {
    "total_chunks": 0,
    "total_tokens": 0,
    "avg_tokens_per_chunk": 0,
    "max_tokens": 0,
    "min_tokens": 0,
}


@pytest.fixture
def client() -> Iterator[TestClient]:
    with TestClient(app) as c:
        yield c


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestChunkPreview:
    def test_fixed_chars(self, client: TestClient) -> None:
        response = client.post(
            "/chunk-preview",
            json={
                "text": "abcdefghijklmnopqrstuvwxyz",
                "strategy_key": "fixed",
                "params": {"unit": "chars", "size": 10, "overlap": 2},
            },
        )
        assert response.status_code == 200
        body = response.json()
        assert [c["text"] for c in body["chunks"]] == ["abcdefghij", "ijklmnopqr", "qrstuvwxyz", "yz"]
        assert body["chunks"][1] == {
            "ordinal": 1,
            "start_char": 8,
            "end_char": 18,
            "text": "ijklmnopqr",
            "token_count": 3,
        }
        assert body["metrics"] == {
            "total_chunks": 4,
            "total_tokens": 10,
            "avg_tokens_per_chunk": 3,
            "max_tokens": 3,
            "min_tokens": 1,
        }

    def test_params_are_optional(self, client: TestClient) -> None:
        response = client.post("/chunk-preview", json={"text": "Hello world.", "strategy_key": "recursive"})
        assert response.status_code == 200
        assert response.json()["chunks"][0]["text"] == "Hello world."

    def test_invalid_params_fall_back_to_defaults(self, client: TestClient) -> None:
        response = client.post(
            "/chunk-preview",
            json={"text": "Hello world.", "strategy_key": "sentence", "params": {"size": "huge"}},
        )
        assert response.status_code == 200
        assert len(response.json()["chunks"]) == 1

    def test_non_object_params_use_defaults(self, client: TestClient) -> None:
        response = client.post(
            "/chunk-preview",
            json={"text": "Hello world.", "strategy_key": "fixed", "params": [1, 2, 3]},
        )
        assert response.status_code == 200

    def test_empty_text_returns_zero_metrics(self, client: TestClient) -> None:
        response = client.post("/chunk-preview", json={"text": "", "strategy_key": "structure", "params": {}})
        assert response.status_code == 200
        assert response.json() == {"chunks": [], "metrics": ZERO_METRICS}

    def test_semantic_is_an_error_envelope(self, client: TestClient) -> None:
        response = client.post(
            "/chunk-preview",
            json={"text": "Anything at all.", "strategy_key": "semantic", "params": {"size": 10}},
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Semantic chunking requires embedding API key"}

    def test_unknown_strategy(self, client: TestClient) -> None:
        response = client.post("/chunk-preview", json={"text": "x", "strategy_key": "paragraph"})
        assert response.status_code == 400
        assert "Unknown strategy" in response.json()["error"]

    @pytest.mark.parametrize(
        "payload",
        [{"strategy_key": "fixed"}, {"text": "x"}, {"text": "x", "strategy_key": ""}, {}],
    )
    def test_missing_fields(self, client: TestClient, payload: dict) -> None:
        response = client.post("/chunk-preview", json=payload)
        assert response.status_code == 400
        assert response.json() == {"error": "Missing text or strategy_key"}

    def test_malformed_body(self, client: TestClient) -> None:
        response = client.post("/chunk-preview", json={"text": 42, "strategy_key": "fixed"})
        assert response.status_code == 400
        assert response.json()["error"].startswith("Invalid request body")

    def test_text_too_large(self, client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(chunker_module, "get_settings", lambda: Settings(preview_max_text_chars=10))
        response = client.post("/chunk-preview", json={"text": "x" * 11, "strategy_key": "fixed"})
        assert response.status_code == 413
        assert "10 character" in response.json()["error"]

    def test_timeout(self, client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
        def slow_preview(*args, **kwargs):
            time.sleep(0.5)

        monkeypatch.setattr(chunk_route, "preview_chunks", slow_preview)
        monkeypatch.setattr(chunk_route, "get_settings", lambda: Settings(preview_timeout_seconds=0.05))
        response = client.post("/chunk-preview", json={"text": "x", "strategy_key": "fixed"})
        assert response.status_code == 504
        assert "did not finish" in response.json()["error"]


class TestStrategies:
    def test_catalog_order_and_availability(self, client: TestClient) -> None:
        response = client.get("/strategies")
        assert response.status_code == 200
        strategies = response.json()["strategies"]
        assert [s["key"] for s in strategies] == ["recursive", "fixed", "sentence", "structure", "semantic"]
        available = {s["key"]: s["available"] for s in strategies}
        assert available["semantic"] is False
        assert all(available[k] for k in ("recursive", "fixed", "sentence", "structure"))

    def test_params_schema_has_defaults_and_bounds(self, client: TestClient) -> None:
        strategies = {s["key"]: s for s in client.get("/strategies").json()["strategies"]}
        fixed_size = strategies["fixed"]["params_schema"]["properties"]["size"]
        assert fixed_size["default"] == 700
        assert fixed_size["minimum"] == 1
        structure_props = strategies["structure"]["params_schema"]["properties"]
        assert structure_props["maxSectionTokens"]["default"] == 1000
        assert structure_props["headerDepth"]["maximum"] == 6
        recursive_props = strategies["recursive"]["params_schema"]["properties"]
        assert recursive_props["separators"]["default"] == ["\n\n", "\n", ". ", " "]
