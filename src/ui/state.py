"""State models for the name generator page."""

from enum import Enum

from pydantic import BaseModel, Field


class Phase(str, Enum):
    """Lifecycle of one generation attempt."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILED = "failed"


class UIState(BaseModel):
    """Per-page state read by the templates.

    Only the pipeline transitions and the copy action write to it.
    """

    phase: Phase = Field(default=Phase.IDLE, description="Current phase")
    names: list[str] = Field(default_factory=list, description="Generated store names")
    error_message: str | None = Field(default=None, description="Error message")
    copied_index: int | None = Field(default=None, description="Index of the last copied name")

    @property
    def is_loading(self) -> bool:
        return self.phase is Phase.LOADING

    def start(self) -> None:
        self.phase = Phase.LOADING
        self.error_message = None

    def succeed(self, names: list[str]) -> None:
        self.names = names
        self.phase = Phase.SUCCESS

    def fail(self, message: str) -> None:
        self.names = []
        self.error_message = message
        self.phase = Phase.FAILED
