"""Tests for HTMX base template and configuration."""

from fastapi.testclient import TestClient


class TestJinja2TemplatesConfiguration:
    """Test Jinja2Templates is properly configured in FastAPI app."""

    def test_jinja2_templates_configured(self):
        """FastAPI app has Jinja2Templates configured."""
        from fastapi.templating import Jinja2Templates

        from src.api.main import app

        assert hasattr(app.state, "templates"), "app.state.templates should be configured"
        assert isinstance(app.state.templates, Jinja2Templates)

    def test_static_files_mounted(self):
        """Static files are mounted at /static path."""
        from src.api.main import app

        routes = [route.path for route in app.routes]
        static_paths = [r for r in routes if r.startswith("/static")]

        assert len(static_paths) > 0, "Static files should be mounted at /static"

    def test_stylesheet_served(self):
        """The stylesheet is served from /static."""
        from src.api.main import app

        client = TestClient(app)
        response = client.get("/static/style.css")

        assert response.status_code == 200
        assert "text/css" in response.headers.get("content-type", "")

    def test_html_structure(self):
        """Base template includes proper HTML5 structure."""
        from src.api.main import app

        client = TestClient(app)
        response = client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers.get("content-type", "")
        html = response.text

        assert "<!DOCTYPE html>" in html
        assert 'lang="en"' in html
        assert "<head>" in html
        assert "<body>" in html
        assert "htmx.org" in html
