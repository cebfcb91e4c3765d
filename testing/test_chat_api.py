"""
API Tests: POST /api/chat/reply

Run with: pytest testing/test_chat_api.py -v
"""

import pytest
import sys
import os

import httpx
from fastapi.testclient import TestClient

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import main
from utils.llm import GeminiClient
from wellness_chat import api as chat_api
from wellness_chat.response_generator import ResponseGenerator


@pytest.fixture
def captured(monkeypatch):
    """Route the endpoint's generator through a mock Gemini transport."""
    state = {"status": 200, "requests": []}

    def handler(request: httpx.Request) -> httpx.Response:
        state["requests"].append(request)
        if state["status"] != 200:
            return httpx.Response(state["status"])
        return httpx.Response(200, json={"candidates": [{"content": {"parts": [{"text": "model reply"}]}}]})

    generator = ResponseGenerator(client=GeminiClient(api_key="k", transport=httpx.MockTransport(handler)))
    monkeypatch.setattr(chat_api, "get_response_generator", lambda: generator)
    return state


@pytest.fixture
def client():
    return TestClient(main.app)


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_reply_from_model(client, captured):
    response = client.post("/api/chat/reply", json={
        "message": "Hi there",
        "history": [
            {"sender": "bot", "content": "Welcome!"},
            {"sender": "user", "content": "Hello"},
            {"sender": "typing", "content": "..."},
        ],
        "context": {"moodRating": 6, "sleepHours": 7},
    })

    assert response.status_code == 200
    assert response.json() == {"reply": "model reply", "source": "model"}

    body = captured["requests"][0].read().decode()
    assert "- Mood: 6/10" in body
    assert "..." not in body


def test_reply_falls_back_on_upstream_error(client, captured):
    captured["status"] = 500
    response = client.post("/api/chat/reply", json={"message": "I feel anxious today"})

    assert response.status_code == 200
    data = response.json()
    assert data["source"] == "fallback"
    assert "4-7-8 Breathing" in data["reply"]


def test_empty_message_rejected(client, captured):
    response = client.post("/api/chat/reply", json={"message": "   "})

    assert response.status_code == 400
    assert captured["requests"] == []
