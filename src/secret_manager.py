"""Google Cloud Secret Manager lookups for settings that hold secrets."""

import os
from functools import lru_cache

from google.api_core import exceptions as gcp_exceptions
from google.cloud import secretmanager

# Settings field -> secret base name
SECRET_NAMES = {
    "session_secret_key": "session-secret-key",
}


@lru_cache
def get_secret_manager_client() -> secretmanager.SecretManagerServiceClient:
    """Get cached Secret Manager client."""
    return secretmanager.SecretManagerServiceClient()


def build_secret_id(base_name: str, environment: str | None = None) -> str:
    """Build the per-environment secret ID, e.g. 'store-namer-session-secret-key-dev'."""
    env = environment or os.environ.get("ENVIRONMENT", "dev")
    return f"store-namer-{base_name}-{env}"


def get_app_secret(key: str, default: str | None = None) -> str | None:
    """Read the latest version of the secret backing a settings field.

    Args:
        key: Settings field name (must be listed in SECRET_NAMES).
        default: Returned when there is no project, no such secret, or no access.

    Returns:
        The decoded secret value, or default.
    """
    project = os.environ.get("GOOGLE_PROJECT_ID")
    if key not in SECRET_NAMES or not project:
        return default

    secret_id = build_secret_id(SECRET_NAMES[key])
    name = f"projects/{project}/secrets/{secret_id}/versions/latest"
    try:
        response = get_secret_manager_client().access_secret_version(request={"name": name})
    except gcp_exceptions.GoogleAPICallError:
        # NotFound, PermissionDenied and other API errors
        return default
    return response.payload.data.decode("UTF-8")
