"""Unit tests for the /api/conversations endpoints."""

import json

import pytest
from fastapi.testclient import TestClient

from lfdigital.providers.llm import MockProviderClient, ProviderError

UNAVAILABLE = json.dumps({"message": "AI service is temporarily unavailable."})


@pytest.fixture
def conversation_id(client: TestClient) -> int:
    response = client.post("/api/conversations", json={})
    return response.json()["id"]


class TestCreateConversation:
    """Tests for POST /api/conversations."""

    def test_creates_empty_conversation(self, client: TestClient) -> None:
        response = client.post("/api/conversations", json={"userId": 7})

        assert response.status_code == 201
        data = response.json()
        assert data["userId"] == 7
        assert data["messages"] == []
        assert "createdAt" in data

    def test_get_returns_conversation(self, client: TestClient, conversation_id: int) -> None:
        response = client.get(f"/api/conversations/{conversation_id}")

        assert response.status_code == 200
        assert response.json()["id"] == conversation_id

    def test_get_unknown_returns_404(self, client: TestClient) -> None:
        response = client.get("/api/conversations/999")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"


class TestSendMessage:
    """Tests for POST /api/conversations/{id}/messages."""

    def test_reply_appended(
        self,
        client: TestClient,
        primary: MockProviderClient,
        conversation_id: int,
    ) -> None:
        primary.queue("Happy to help with that.")

        response = client.post(
            f"/api/conversations/{conversation_id}/messages",
            json={"message": "Can you build an app?"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["message"]["role"] == "assistant"
        assert data["message"]["content"] == "Happy to help with that."
        assert [m["content"] for m in data["conversation"]["messages"]] == [
            "Can you build an app?",
            "Happy to help with that.",
        ]

    def test_history_sent_on_next_message(
        self,
        client: TestClient,
        primary: MockProviderClient,
        conversation_id: int,
    ) -> None:
        primary.queue("First answer.", "Second answer.")
        url = f"/api/conversations/{conversation_id}/messages"

        client.post(url, json={"message": "First question"})
        client.post(url, json={"message": "Second question"})

        sent = primary.call_history[1]["messages"]
        assert [m.role for m in sent] == ["system", "user", "assistant", "user"]

    def test_unknown_conversation_returns_404(
        self, client: TestClient, primary: MockProviderClient
    ) -> None:
        response = client.post(
            "/api/conversations/999/messages",
            json={"message": "Hello"},
        )

        assert response.status_code == 404
        assert primary.complete_calls == 0

    def test_all_providers_failing_returns_500(
        self,
        client: TestClient,
        primary: MockProviderClient,
        fallback: MockProviderClient,
        last_resort: MockProviderClient,
        conversation_id: int,
    ) -> None:
        """The conversation is left unchanged when no provider replies."""
        primary.queue(UNAVAILABLE)
        fallback.queue("")
        last_resort.queue(ProviderError("timed out"))

        response = client.post(
            f"/api/conversations/{conversation_id}/messages",
            json={"message": "Hello"},
        )

        assert response.status_code == 500
        assert response.json()["error"]["code"] == "AI_SERVICE_UNAVAILABLE"
        stored = client.get(f"/api/conversations/{conversation_id}").json()
        assert stored["messages"] == []

    def test_empty_message_rejected(self, client: TestClient, conversation_id: int) -> None:
        response = client.post(
            f"/api/conversations/{conversation_id}/messages",
            json={"message": ""},
        )

        assert response.status_code == 400
