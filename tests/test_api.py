"""Tests for the FastAPI JSON API."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from src.errors import RequestFailedError


@pytest.fixture
def client():
    """Create test client."""
    from src.api.main import app

    return TestClient(app)


class TestHealthEndpoint:
    """Test health check endpoint."""

    def test_health_check_returns_ok(self, client):
        """Test that health check returns OK status."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestGenerateEndpoint:
    """Test store name generation endpoint."""

    def test_generate_returns_names(self, client, stub_generator):
        """POST /generate returns parsed names in model order."""
        with patch("src.api.main.text_generator", stub_generator):
            response = client.post("/generate", json={"description": "moon themed boutique"})

        assert response.status_code == 200
        assert response.json() == {
            "names": ["Luna Boutique", "Starlight Goods", "Cozy Corner"]
        }
        assert "moon themed boutique" in stub_generator.calls[0][0]

    def test_generate_blank_description_rejected(self, client, stub_generator):
        """Blank descriptions fail validation without calling the model."""
        with patch("src.api.main.text_generator", stub_generator):
            response = client.post("/generate", json={"description": "   "})

        assert response.status_code == 422
        assert stub_generator.calls == []

    def test_generate_not_configured(self, client):
        """Missing configuration maps to 503."""
        with patch("src.api.main.text_generator", None):
            response = client.post("/generate", json={"description": "tea shop"})

        assert response.status_code == 503
        assert "not configured" in response.json()["detail"]

    def test_generate_request_failed(self, client, stub_factory):
        """Call failures map to 502 with the fault message."""
        generator = stub_factory(error=RequestFailedError("quota exceeded"))

        with patch("src.api.main.text_generator", generator):
            response = client.post("/generate", json={"description": "tea shop"})

        assert response.status_code == 502
        assert response.json()["detail"] == "quota exceeded"


class TestServeEntryPoint:
    """Test the uvicorn entry point."""

    def test_run_serves_app_with_uvicorn(self):
        """run() hands the app import path and settings to uvicorn."""
        from src.api import main
        from src.config import settings

        with patch("src.api.main.uvicorn.run") as mock_run:
            main.run()

        mock_run.assert_called_once_with(
            "src.api.main:app",
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
        )


class TestAPIModels:
    """Test API request and response models."""

    def test_generate_request_model(self):
        """Test GenerateRequest keeps the description verbatim."""
        from src.api.models import GenerateRequest

        request = GenerateRequest(description="  Eco-friendly kids clothing  ")

        assert request.description == "  Eco-friendly kids clothing  "

    def test_generate_request_rejects_blank(self):
        """Test GenerateRequest rejects whitespace-only input."""
        from pydantic import ValidationError

        from src.api.models import GenerateRequest

        with pytest.raises(ValidationError):
            GenerateRequest(description="\n\t ")

    def test_generate_response_model(self):
        """Test GenerateResponse model."""
        from src.api.models import GenerateResponse

        response = GenerateResponse(names=["Alpha", "Beta"])

        assert response.names == ["Alpha", "Beta"]

    def test_error_response_model(self):
        """Test ErrorResponse model."""
        from src.api.models import ErrorResponse

        error = ErrorResponse(detail="Gemini is not configured.")

        assert error.detail == "Gemini is not configured."


class TestSessionManager:
    """Test in-memory page sessions."""

    def test_create_and_get(self):
        """Created sessions can be looked up by ID."""
        from src.api.session_manager import SessionManager
        from src.ui.state import Phase

        manager = SessionManager()
        session = manager.create()

        assert manager.get(session.id) is session
        assert session.state.phase is Phase.IDLE
        assert len(manager) == 1

    def test_get_unknown_returns_none(self):
        """Unknown or missing IDs return None."""
        from src.api.session_manager import SessionManager

        manager = SessionManager()

        assert manager.get("missing") is None
        assert manager.get(None) is None

    def test_get_or_create_reuses_session(self):
        """get_or_create returns the existing session when present."""
        from src.api.session_manager import SessionManager

        manager = SessionManager()
        session = manager.create()

        assert manager.get_or_create(session.id) is session
        assert manager.get_or_create("missing") is not session

    def test_discard(self):
        """Discarded sessions are gone."""
        from src.api.session_manager import SessionManager

        manager = SessionManager()
        session = manager.create()
        manager.discard(session.id)
        manager.discard(None)

        assert manager.get(session.id) is None

    def test_expired_sessions_cleaned_up(self):
        """Sessions idle past the TTL are removed."""
        from src.api.session_manager import SessionManager

        manager = SessionManager(ttl_seconds=60)
        session = manager.create()
        session.last_seen -= 120

        assert manager.get(session.id) is None
        assert len(manager) == 0

    def test_copy_feedback_uses_configured_interval(self):
        """Sessions get a copy tracker bound to their own state."""
        from src.api.session_manager import SessionManager

        manager = SessionManager(copy_reset_seconds=0.5)
        session = manager.create()

        assert session.copy_feedback.reset_after == 0.5
        assert session.copy_feedback.state is session.state
