"""
Process-wide state shared across all routes.

Admin sessions live in a plain dict keyed by token. Nothing is persisted, so
a restart logs everybody out. Expired entries are evicted lazily when a token
is checked; purge_expired() is available for an explicit sweep.

`database` is the storage adapter every service reads and writes through.
"""

import logging
import secrets
import time
from typing import Callable, Optional

import config
from models.session import Session
from storage.sqlite import SQLiteStorage

logger = logging.getLogger(__name__)


def now_ms() -> int:
    return int(time.time() * 1000)


class SessionStore:
    def __init__(self, ttl_ms: int = config.SESSION_TTL_MS, clock: Callable[[], int] = now_ms):
        self.ttl_ms = ttl_ms
        self.clock = clock
        self._sessions: dict[str, Session] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, token: str) -> bool:
        return token in self._sessions

    def create(self, username: str) -> str:
        token = secrets.token_urlsafe(32)
        self._sessions[token] = Session(token=token, username=username, login_time=self.clock())
        return token

    def _expired(self, session: Session, now: int) -> bool:
        return now - session.login_time > self.ttl_ms

    def validate(self, token: Optional[str]) -> Optional[Session]:
        """Return the live session for token, or None. Expired entries are removed."""
        if not token:
            return None
        session = self._sessions.get(token)
        if session is None:
            return None
        if self._expired(session, self.clock()):
            self._sessions.pop(token, None)
            logger.info("Session for %s expired", session.username)
            return None
        return session

    def invalidate(self, token: Optional[str]) -> None:
        if token:
            self._sessions.pop(token, None)

    def clear_all(self) -> None:
        self._sessions.clear()

    def purge_expired(self) -> int:
        now = self.clock()
        stale = [t for t, s in list(self._sessions.items()) if self._expired(s, now)]
        for token in stale:
            self._sessions.pop(token, None)
        return len(stale)


sessions = SessionStore()
database = SQLiteStorage(config.DATABASE_PATH)
