"""UI state, copy action and API client for the name generator."""

from src.ui.api_client import APIClient, APIError
from src.ui.clipboard import Clipboard, CopyFeedback
from src.ui.state import Phase, UIState
from src.ui.utils import format_name_list, truncate_text

__all__ = [
    "APIClient",
    "APIError",
    "Clipboard",
    "CopyFeedback",
    "Phase",
    "UIState",
    "format_name_list",
    "truncate_text",
]
