"""
Tests for the FastAPI routes.
"""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from app.api.app import app
from app.models.schemas import ContentType, SummaryResponse
from app.utils.error_handling import CompletionServiceError, ExtractionFailed


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def summary_response():
    return SummaryResponse(
        preview_image="/img/website-placeholder.png",
        summary="- point one\n- point two",
        content_title="A Blog Post",
        content_type=ContentType.WEBSITE,
        url="https://example.com/post",
        process_time_seconds=1.25,
    )


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "/api/v1/process" in response.json()["instructions"]
    assert "X-Process-Time" in response.headers


def test_process_url(client, summary_response):
    with patch("app.api.routes.summarize_url", new=AsyncMock(return_value=summary_response)) as mock_summarize:
        response = client.post("/api/v1/process", json={"url": "  https://example.com/post "})

    assert response.status_code == 200
    mock_summarize.assert_awaited_once_with("https://example.com/post")
    body = response.json()
    assert body["summary"] == "- point one\n- point two"
    assert body["content_type"] == "website"
    assert body["process_time_seconds"] == 1.25


def test_process_url_requires_url(client):
    assert client.post("/api/v1/process", json={}).status_code == 422
    assert client.post("/api/v1/process", json={"url": "   "}).status_code == 422


def test_process_url_extraction_failure(client):
    failure = AsyncMock(side_effect=ExtractionFailed("Invalid YouTube URL format"))
    with patch("app.api.routes.summarize_url", new=failure):
        response = client.post("/api/v1/process", json={"url": "https://www.youtube.com/feed"})

    assert response.status_code == 422
    assert response.json()["detail"] == "Error processing URL: Invalid YouTube URL format"


def test_ask_groq(client):
    with patch("app.api.routes.ask_question", new=AsyncMock(return_value="Water boils at 100C.")):
        response = client.post("/api/v1/ask-groq", json={"prompt": "At what temperature does water boil?"})

    assert response.status_code == 200
    body = response.json()
    assert body["reply"] == "Water boils at 100C."
    assert body["message"] == "Groq API Response"
    assert "educational" in body["note"]


def test_ask_groq_service_error(client):
    failure = AsyncMock(side_effect=CompletionServiceError("quota exceeded"))
    with patch("app.api.routes.ask_question", new=failure):
        response = client.post("/api/v1/ask-groq", json={"prompt": "Explain entropy"})

    assert response.status_code == 502
    assert response.json()["detail"] == "Error with Groq API: quota exceeded"


def test_ask_groq_requires_prompt(client):
    assert client.post("/api/v1/ask-groq", json={"prompt": ""}).status_code == 422
