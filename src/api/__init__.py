"""API module for FastAPI endpoints."""

from src.api.models import ErrorResponse, GenerateRequest, GenerateResponse
from src.api.session_manager import PageSession, SessionManager

__all__ = [
    "ErrorResponse",
    "GenerateRequest",
    "GenerateResponse",
    "PageSession",
    "SessionManager",
]
