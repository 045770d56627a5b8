"""
Tests for the REST API: chat endpoint, health check and status.

The orchestrator dependency is overridden so the live model is either absent
or a fake.
"""

import pytest
from fastapi.testclient import TestClient

from mirae.api.app import app
from mirae.api.routes import get_orchestrator
from mirae.core.orchestrator import HybridOrchestrator


class FakeGenerator:
    is_available = True

    def generate(self, messages, context, scenario, language):
        return "Which part of that felt most like you?"


@pytest.fixture
def scripted_client():
    orch = HybridOrchestrator(generator=None)
    app.dependency_overrides[get_orchestrator] = lambda: orch
    yield TestClient(app)
    app.dependency_overrides.clear()
    orch.close()


@pytest.fixture
def live_client():
    orch = HybridOrchestrator(generator=FakeGenerator())
    app.dependency_overrides[get_orchestrator] = lambda: orch
    yield TestClient(app)
    app.dependency_overrides.clear()
    orch.close()


def _payload(**overrides):
    payload = {
        "messages": [],
        "userContext": {"name": "Mina", "courses": ["Design Thinking", "Statistics"]},
        "currentTurn": 0,
        "scenario": "year1_post_selection",
        "language": "en",
    }
    payload.update(overrides)
    return payload


class TestChat:
    def test_opening_from_script(self, scripted_client):
        r = scripted_client.post("/api/skill-translation/chat", json=_payload())
        assert r.status_code == 200
        data = r.json()
        assert data["source"] == "fallback"
        assert data["currentTurn"] == 1
        assert data["phase"] == "recap"
        assert data["warning"]
        assert data["scenario"] == "year1_post_selection"
        assert "Design Thinking" in data["message"]

    def test_reply_advances(self, scripted_client):
        payload = _payload(
            messages=[{"role": "user", "content": "creative problem solving"}],
            currentTurn=1,
        )
        data = scripted_client.post("/api/skill-translation/chat", json=payload).json()
        assert data["currentTurn"] == 2

    def test_live_reply(self, live_client):
        r = live_client.post("/api/skill-translation/chat", json=_payload(currentTurn=4))
        assert r.status_code == 200
        data = r.json()
        assert data["source"] == "openai"
        assert data["currentTurn"] == 5
        assert data["message"] == "Which part of that felt most like you?"
        assert "warning" not in data

    def test_force_real_api_answers_from_script(self, live_client):
        r = live_client.post("/api/skill-translation/chat", json=_payload(forceRealAPI=True))
        data = r.json()
        assert data["source"] == "fallback"
        assert data["currentTurn"] == 1
        assert data["warning"]

    @pytest.mark.parametrize("user_context", [
        {"courses": ["Statistics"]},
        {"name": "Mina", "courses": []},
        {"name": "Mina"},
    ])
    def test_missing_context_is_400(self, scripted_client, user_context):
        r = scripted_client.post("/api/skill-translation/chat", json=_payload(userContext=user_context))
        assert r.status_code == 400
        assert "Missing required user context" in r.json()["detail"]

    def test_no_context_is_400(self, scripted_client):
        payload = _payload()
        del payload["userContext"]
        r = scripted_client.post("/api/skill-translation/chat", json=payload)
        assert r.status_code == 400

    def test_out_of_range_year_is_422(self, scripted_client):
        ctx = {"name": "Mina", "courses": ["Statistics"], "yearLevel": 7}
        r = scripted_client.post("/api/skill-translation/chat", json=_payload(userContext=ctx))
        assert r.status_code == 422

    def test_unknown_language_answers_in_korean(self, scripted_client):
        data = scripted_client.post("/api/skill-translation/chat", json=_payload(language="fr")).json()
        assert data["source"] == "fallback"
        assert "님" in data["message"]


class TestHealth:
    def test_not_configured(self, scripted_client):
        data = scripted_client.get("/api/skill-translation/chat").json()
        assert data["status"] == "ok"
        assert data["openai"] == "not configured"
        assert data["fallback"] == "available"
        assert "general_reflection" in data["scenarios"]

    def test_configured(self, live_client):
        data = live_client.get("/api/skill-translation/chat").json()
        assert data["openai"] == "configured"

    def test_status_scripted(self, scripted_client):
        assert scripted_client.get("/api/status").json() == {"llm_available": False}

    def test_status_live(self, live_client):
        assert live_client.get("/api/status").json() == {"llm_available": True}

    def test_root(self, scripted_client):
        assert scripted_client.get("/").json()["docs"] == "/docs"
