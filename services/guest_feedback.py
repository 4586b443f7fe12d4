"""In-memory feedback for visitors without an account.

Guest feedback is never persisted. Each session keeps its entries until it
has been idle for longer than the TTL, after which the whole session is
dropped. The store is created once per application and shared through
`app.state`, so every request thread goes through the same lock.
"""

import threading
import time
from datetime import datetime, timezone
from typing import Callable, Dict, List

from core.logger import get_logger
from schemas.feedback_schema import FeedbackEntry

logger = get_logger("services.guest_feedback")

DEFAULT_SESSION_ID = "guest"


class _GuestSession:
    __slots__ = ("last_seen", "entries")

    def __init__(self, last_seen: float):
        self.last_seen = last_seen
        self.entries: List[FeedbackEntry] = []


class GuestFeedbackStore:
    """TTL-evicting store of guest feedback keyed by session id."""

    def __init__(self, ttl_seconds: int = 2 * 60 * 60, clock: Callable[[], float] = time.time):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._sessions: Dict[str, _GuestSession] = {}
        self._lock = threading.Lock()

    def cleanup(self) -> int:
        """Drop sessions idle longer than the TTL and return how many were removed."""
        with self._lock:
            return self._cleanup_locked()

    def _cleanup_locked(self) -> int:
        now = self._clock()
        expired = [sid for sid, s in self._sessions.items() if now - s.last_seen > self.ttl_seconds]
        for sid in expired:
            del self._sessions[sid]
        if expired:
            logger.debug("Evicted %s expired guest sessions", len(expired))
        return len(expired)

    def add(self, session_id: str, meal_id: str, feedback_type: str) -> FeedbackEntry:
        """Record feedback for a session and refresh its idle timer."""
        now = self._clock()
        entry = FeedbackEntry(
            meal_id=meal_id,
            type=feedback_type,
            timestamp=datetime.fromtimestamp(now, tz=timezone.utc),
        )
        with self._lock:
            self._cleanup_locked()
            session = self._sessions.get(session_id)
            if session is None:
                session = _GuestSession(now)
                self._sessions[session_id] = session
            session.entries.append(entry)
            session.last_seen = now
        return entry

    def get(self, session_id: str) -> List[FeedbackEntry]:
        """Return a copy of the session's entries, oldest first."""
        with self._lock:
            self._cleanup_locked()
            session = self._sessions.get(session_id)
            return list(session.entries) if session else []

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
