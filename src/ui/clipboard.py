"""Copy-to-clipboard action with timed "Copied!" feedback."""

import asyncio
import logging
from typing import Protocol

from src.ui.state import UIState

logger = logging.getLogger(__name__)

DEFAULT_RESET_SECONDS = 2.0


class Clipboard(Protocol):
    """Capability that writes text to the system clipboard."""

    async def write(self, text: str) -> None:
        ...


class CopyFeedback:
    """Tracks the most recently copied name and clears it after a delay.

    Each copy cancels the pending reset and schedules a new one, so the
    interval is always measured from the latest copy. Must be used from
    inside a running event loop.
    """

    def __init__(
        self,
        state: UIState,
        clipboard: Clipboard | None = None,
        reset_after: float = DEFAULT_RESET_SECONDS,
    ):
        self.state = state
        self.clipboard = clipboard
        self.reset_after = reset_after
        self._reset_handle: asyncio.TimerHandle | None = None
        self._writes: set[asyncio.Task] = set()

    def copy(self, name: str, index: int) -> None:
        """Copy a name and mark its index as copied."""
        loop = asyncio.get_running_loop()

        if self.clipboard is not None:
            task = loop.create_task(self.clipboard.write(name))
            self._writes.add(task)
            task.add_done_callback(self._on_write_done)

        self.state.copied_index = index
        self.cancel()
        self._reset_handle = loop.call_later(self.reset_after, self._reset)

    def cancel(self) -> None:
        """Cancel the pending reset, if any."""
        if self._reset_handle is not None:
            self._reset_handle.cancel()
            self._reset_handle = None

    def _reset(self) -> None:
        self._reset_handle = None
        self.state.copied_index = None

    def _on_write_done(self, task: asyncio.Task) -> None:
        self._writes.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.warning(f"Clipboard write failed: {task.exception()}")
