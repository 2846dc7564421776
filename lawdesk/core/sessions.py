"""
Server-side session store.

The signed session cookie only carries an opaque session id; the mapping
from session id to user id lives here, in process memory. Sessions expire
after a fixed lifetime and are dropped lazily on read as well as by the
periodic sweep started from the application lifespan.
"""

import asyncio
import logging
import secrets
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

logger = logging.getLogger(__name__)


@dataclass
class SessionEntry:
    user_id: int
    expires_at: float


class SessionStore:
    def __init__(self, max_age_seconds: int = 86400, clock: Callable[[], float] = time.monotonic):
        self.max_age_seconds = max_age_seconds
        self._clock = clock
        self._sessions: Dict[str, SessionEntry] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self, user_id: int) -> str:
        session_id = secrets.token_urlsafe(32)
        self._sessions[session_id] = SessionEntry(
            user_id=user_id,
            expires_at=self._clock() + self.max_age_seconds,
        )
        return session_id

    def get_user_id(self, session_id: Optional[str]) -> Optional[int]:
        if not session_id:
            return None
        entry = self._sessions.get(session_id)
        if entry is None:
            return None
        if entry.expires_at <= self._clock():
            del self._sessions[session_id]
            return None
        return entry.user_id

    def destroy(self, session_id: Optional[str]) -> bool:
        if not session_id:
            return False
        return self._sessions.pop(session_id, None) is not None

    def destroy_user_sessions(self, user_id: int) -> int:
        """Drop every session belonging to a user (used when the user is deleted)."""
        stale = [sid for sid, entry in self._sessions.items() if entry.user_id == user_id]
        for sid in stale:
            del self._sessions[sid]
        return len(stale)

    def sweep(self) -> int:
        now = self._clock()
        expired = [sid for sid, entry in self._sessions.items() if entry.expires_at <= now]
        for sid in expired:
            del self._sessions[sid]
        return len(expired)


async def sweep_periodically(store: SessionStore, interval_seconds: float):
    while True:
        await asyncio.sleep(interval_seconds)
        removed = store.sweep()
        if removed:
            logger.info(f"Removed {removed} expired sessions")
