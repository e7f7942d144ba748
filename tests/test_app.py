"""
Web API Endpoint Tests
======================
Integration tests for the Flask JSON API, driven by a fake clock so the
timer-based playback is deterministic.
"""
import pytest

from config import Settings
from main import create_app


@pytest.fixture
def app(clock):
    settings = Settings(AUTO_PLAY=False, RANDOM_SEED=5, DEFAULT_INTERVAL_MS=600)
    return create_app(settings, clock=clock)


@pytest.fixture
def client(app):
    return app.test_client()


# ============================================================================
# INFO
# ============================================================================

class TestInfoEndpoints:

    def test_index(self, client):
        data = client.get("/").get_json()
        assert data["operations"] == ["insert", "delete_min"]
        assert "turbo" in data["speed_presets"]

    def test_initial_state(self, client):
        data = client.get("/api/state").get_json()
        assert data["heap"] == []
        assert data["state"] == "idle"
        assert data["highlight"] == {"kind": "none", "indices": []}
        assert data["is_playing"] is False
        assert data["trace"] is None
        assert data["metrics"] is None

    def test_operations(self, client):
        ops = client.get("/api/operations").get_json()
        assert [op["key"] for op in ops] == ["insert", "delete_min"]
        assert ops[0]["takes_value"] is True
        assert ops[1]["pseudocode"][0].startswith("def delete_min")


# ============================================================================
# OPERATIONS
# ============================================================================

class TestOperations:

    def test_insert(self, client):
        data = client.post("/api/insert", json={"value": 5}).get_json()
        assert data["accepted"] is True
        assert data["heap"] == [5]
        assert data["highlight"]["kind"] == "push"
        assert [s["type"] for s in data["trace"]["steps"]] == ["push", "done"]
        assert data["metrics"]["total_steps"] == 2

    def test_insert_non_numeric_is_ignored(self, client):
        response = client.post("/api/insert", json={"value": "banana"})
        assert response.status_code == 200
        data = response.get_json()
        assert data["accepted"] is False
        assert data["heap"] == []

    def test_insert_huge_integer_is_ignored(self, client):
        body = '{"value": 1' + "0" * 400 + "}"
        response = client.post("/api/insert", data=body, content_type="application/json")
        assert response.status_code == 200
        data = response.get_json()
        assert data["accepted"] is False
        assert data["heap"] == []

    def test_insert_without_body(self, client):
        response = client.post("/api/insert")
        assert response.status_code == 400
        assert "error" in response.get_json()

    def test_insert_random(self, client):
        data = client.post("/api/insert_random").get_json()
        assert 0 <= data["value"] <= 99
        assert data["heap"] == [data["value"]]

    def test_delete_min_on_empty(self, client):
        data = client.post("/api/delete_min").get_json()
        assert data["accepted"] is False
        assert data["state"] == "idle"

    def test_delete_min_scenario(self, client):
        for v in (1, 3, 2, 7, 0):
            client.post("/api/insert", json={"value": v})
        data = client.post("/api/delete_min").get_json()
        assert data["highlight"] == {"kind": "removeRoot", "indices": [0, 4]}
        assert [s["type"] for s in data["trace"]["steps"]] == [
            "removeRoot", "swap", "pop", "compare", "swap", "compare", "done",
        ]
        assert data["trace"]["steps"][-1]["heap"] == [1, 3, 2, 7]

    def test_reset(self, client):
        client.post("/api/insert", json={"value": 1})
        data = client.post("/api/reset").get_json()
        assert data["heap"] == []
        assert data["state"] == "idle"


# ============================================================================
# PLAYBACK
# ============================================================================

class TestPlayback:

    def test_step(self, client):
        client.post("/api/insert", json={"value": 5})
        data = client.post("/api/step").get_json()
        assert data["highlight"]["kind"] == "done"
        assert data["cursor"] == 2
        data = client.post("/api/step").get_json()
        assert data["state"] == "idle"
        assert data["highlight"]["kind"] == "none"

    def test_play_advances_on_poll(self, client, clock):
        client.post("/api/insert", json={"value": 5})
        data = client.post("/api/play").get_json()
        assert data["is_playing"] is True
        clock.advance(600)
        data = client.get("/api/state").get_json()
        assert data["highlight"]["kind"] == "done"
        clock.advance(600)
        data = client.get("/api/state").get_json()
        assert data["state"] == "idle"
        assert data["is_playing"] is False

    def test_pause_and_toggle(self, client):
        client.post("/api/insert", json={"value": 5})
        client.post("/api/play")
        data = client.post("/api/pause").get_json()
        assert data["state"] == "paused"
        data = client.post("/api/toggle").get_json()
        assert data["is_playing"] is True

    def test_speed_level(self, client):
        data = client.post("/api/speed", json={"level": 10}).get_json()
        assert data["interval_ms"] == 100

    def test_speed_preset(self, client):
        data = client.post("/api/speed", json={"preset": "slow"}).get_json()
        assert data["interval_ms"] == 1200

    @pytest.mark.parametrize("body", [{"preset": "warp"}, {"level": "fast"}, {"level": True}, {}])
    def test_speed_rejects_bad_input(self, client, body):
        response = client.post("/api/speed", json=body)
        assert response.status_code == 400
        assert "error" in response.get_json()
