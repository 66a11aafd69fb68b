"""In-memory page sessions for the name generator UI."""

import time
from dataclasses import dataclass, field
from uuid import uuid4

from src.ui.clipboard import DEFAULT_RESET_SECONDS, CopyFeedback
from src.ui.state import UIState


@dataclass
class PageSession:
    """State for one browser page load."""

    id: str
    state: UIState
    copy_feedback: CopyFeedback
    last_seen: float = field(default_factory=time.time)


class SessionManager:
    """Keeps one UIState per browser session.

    Sessions live in memory only and are dropped after the TTL expires
    or when the page is reloaded.
    """

    def __init__(
        self,
        ttl_seconds: int = 3600,
        copy_reset_seconds: float = DEFAULT_RESET_SECONDS,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self.copy_reset_seconds = copy_reset_seconds
        self._sessions: dict[str, PageSession] = {}

    def create(self) -> PageSession:
        """Create a fresh session with Idle state."""
        self._cleanup_old_sessions()
        state = UIState()
        session = PageSession(
            id=uuid4().hex,
            state=state,
            copy_feedback=CopyFeedback(state, reset_after=self.copy_reset_seconds),
        )
        self._sessions[session.id] = session
        return session

    def get(self, session_id: str | None) -> PageSession | None:
        """Get a session by ID, refreshing its last-seen time."""
        self._cleanup_old_sessions()
        if session_id is None:
            return None
        session = self._sessions.get(session_id)
        if session is not None:
            session.last_seen = time.time()
        return session

    def get_or_create(self, session_id: str | None) -> PageSession:
        return self.get(session_id) or self.create()

    def discard(self, session_id: str | None) -> None:
        """Drop a session and cancel its pending copy reset."""
        if session_id is None:
            return
        if session := self._sessions.pop(session_id, None):
            session.copy_feedback.cancel()

    def __len__(self) -> int:
        return len(self._sessions)

    def _cleanup_old_sessions(self) -> None:
        """Remove sessions idle for longer than the TTL."""
        now = time.time()
        expired = [
            session_id
            for session_id, session in self._sessions.items()
            if now - session.last_seen > self.ttl_seconds
        ]
        for session_id in expired:
            self.discard(session_id)
