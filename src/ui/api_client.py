"""API client for communicating with the FastAPI backend."""

import logging
import os

import httpx

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Error response from the name generation API."""

    def __init__(self, status_code: int, detail: str):
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail


def _get_id_token(audience: str) -> str | None:
    """Get ID token for Cloud Run service-to-service authentication.

    Args:
        audience: The URL of the target service.

    Returns:
        ID token string, or None if not running on GCP or token fetch fails.
    """
    try:
        import google.auth.transport.requests
        import google.oauth2.id_token

        request = google.auth.transport.requests.Request()
        return google.oauth2.id_token.fetch_id_token(request, audience)
    except Exception as e:
        logger.debug(f"Could not get ID token (likely running locally): {e}")
        return None


class APIClient:
    """Client for the store name generation API."""

    def __init__(self, base_url: str | None = None, transport: httpx.BaseTransport | None = None):
        """Initialize the API client.

        Args:
            base_url: Base URL of the API server. If not provided, uses API_URL env var
                     or defaults to http://localhost:8000.
            transport: Optional httpx transport (used by tests).
        """
        self.base_url = base_url or os.environ.get("API_URL", "http://localhost:8000")
        self.timeout = 60.0
        self.transport = transport

    def _client(self, timeout: float) -> httpx.Client:
        return httpx.Client(timeout=timeout, transport=self.transport)

    def _get_auth_headers(self) -> dict[str, str]:
        """Get authentication headers for API requests.

        Returns:
            Headers dict with Authorization if running on GCP, empty dict otherwise.
        """
        token = _get_id_token(self.base_url)
        if token:
            return {"Authorization": f"Bearer {token}"}
        return {}

    def health_check(self) -> bool:
        """Check if the API is healthy.

        Returns:
            True if API is healthy, False otherwise.
        """
        try:
            headers = self._get_auth_headers()
            with self._client(timeout=5.0) as client:
                response = client.get(f"{self.base_url}/health", headers=headers)
                return response.status_code == 200
        except httpx.RequestError:
            return False

    def generate(self, description: str) -> list[str]:
        """Generate store names for a description.

        Args:
            description: Free-text store description.

        Returns:
            Generated store names.

        Raises:
            APIError: If the API returns an error status.
            httpx.RequestError: If the server can't be reached.
        """
        headers = self._get_auth_headers()
        with self._client(timeout=self.timeout) as client:
            response = client.post(
                f"{self.base_url}/generate",
                json={"description": description},
                headers=headers,
            )

        if response.is_error:
            try:
                detail = response.json().get("detail", response.text)
            except ValueError:
                detail = response.text
            raise APIError(response.status_code, str(detail))

        return response.json()["names"]
