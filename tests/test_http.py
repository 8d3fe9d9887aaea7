"""
Tests for the FastAPI server.

Dependencies are overridden so no Supabase or model calls are made.
"""

from datetime import date
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from sinc_assistant.services import AssistantService, AuthenticationError, ServiceContext
from sinc_assistant.services.http import app
from sinc_assistant.services.http import server
from sinc_assistant.services.http.server import get_assistant_service, get_auth_service, get_today


@pytest.fixture
def context(app_settings):
    instance = ServiceContext(settings=app_settings)
    instance.events = MagicMock()
    instance.events.fetch_for_member.return_value = []
    return instance


@pytest.fixture
def auth():
    service = MagicMock()
    service.resolve_user_id.return_value = "user-1"
    return service


@pytest.fixture
def client(context, auth):
    app.dependency_overrides[get_assistant_service] = lambda: AssistantService(context)
    app.dependency_overrides[get_auth_service] = lambda: auth
    app.dependency_overrides[get_today] = lambda: date(2024, 1, 10)
    yield TestClient(app)
    app.dependency_overrides.clear()


AUTH = {"Authorization": "Bearer token-123"}


class TestProcessEndpoint:
    def test_greeting(self, client, auth):
        response = client.post("/api/ai/process", json={"text": "Ahoj"}, headers=AUTH)
        assert response.status_code == 200
        assert response.json()["type"] == "greeting"
        auth.resolve_user_id.assert_called_once_with("token-123")

    def test_event_creation_payload(self, client):
        response = client.post(
            "/api/ai/process",
            json={"text": "vytvoř večeře zítra v 19:00", "conversationHistory": []},
            headers=AUTH,
        )
        body = response.json()
        assert body["eventData"]["date"] == "2024-01-11"
        assert body["eventData"]["time"] == "19:00"
        assert body["eventData"]["title"] == "Večeře"

    def test_history_follow_up(self, client):
        history = [{"type": "ai", "content": "...", "eventData": {"title": "Kafe", "date": "2024-01-12", "time": "10:00"}}]
        response = client.post("/api/ai/process", json={"text": "ano", "conversationHistory": history}, headers=AUTH)
        assert response.json()["eventData"]["title"] == "Kafe"

    def test_meeting_suggestions(self, client, context):
        response = client.post("/api/ai/process", json={"text": "kdy se můžeme sejít"}, headers=AUTH)
        body = response.json()
        assert len(body["suggestions"]) == 5
        context.events.fetch_for_member.assert_called_once_with("user-1", date(2024, 1, 10), date(2024, 1, 24))

    @pytest.mark.parametrize(
        "payload",
        [{"text": ""}, {"text": "   "}, {}, {"text": "ahoj", "conversationHistory": "nope"}],
    )
    def test_invalid_body(self, client, payload):
        response = client.post("/api/ai/process", json=payload, headers=AUTH)
        assert response.status_code == 400
        assert response.json()["errors"]

    def test_missing_token(self, client):
        assert client.post("/api/ai/process", json={"text": "ahoj"}).status_code == 401

    def test_rejected_token(self, client, auth):
        auth.resolve_user_id.side_effect = AuthenticationError("Invalid access token.")
        assert client.post("/api/ai/process", json={"text": "ahoj"}, headers=AUTH).status_code == 401

    def test_unexpected_failure(self, client):
        broken = MagicMock()
        broken.process.side_effect = RuntimeError("boom")
        app.dependency_overrides[get_assistant_service] = lambda: broken
        response = client.post("/api/ai/process", json={"text": "ahoj"}, headers=AUTH)
        assert response.status_code == 500
        assert response.json() == {"error": "AI processing failed"}


class TestOtherRoutes:
    def test_health(self, client):
        assert client.get("/api/health").json()["status"] == "OK"

    def test_list_functions(self, client):
        names = {item["name"] for item in client.get("/api/functions").json()["functions"]}
        assert {"classify_intent", "extract_event_draft", "analyze_free_busy", "find_free_slots"} <= names

    def test_invoke_function(self, client):
        response = client.post("/api/functions/classify_intent", json={"arguments": {"text": "ahoj"}})
        assert response.status_code == 200
        assert response.json()["result"]["intent"] == "greeting"

    def test_unknown_function(self, client):
        assert client.post("/api/functions/nope", json={"arguments": {}}).status_code == 404

    def test_bad_arguments(self, client):
        response = client.post("/api/functions/find_free_slots", json={"arguments": {"today": "tomorrow"}})
        assert response.status_code == 400

    @pytest.mark.parametrize(
        "name, arguments",
        [
            ("classify_intent", {"text": 5}),
            ("find_free_slots", {"events": ["x"]}),
            ("analyze_free_busy", {"events": [{"title": "bez data"}]}),
        ],
    )
    def test_wrongly_typed_arguments(self, client, name, arguments):
        response = client.post(f"/api/functions/{name}", json={"arguments": arguments})
        assert response.status_code == 400


class TestDependencies:
    def test_assistant_service_is_shared(self):
        server._context.cache_clear()
        get_assistant_service.cache_clear()
        try:
            first = get_assistant_service()
            assert get_assistant_service() is first
            assert first.orchestrator is get_assistant_service().orchestrator
        finally:
            get_assistant_service.cache_clear()
            server._context.cache_clear()
