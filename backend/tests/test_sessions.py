"""
Session store behaviour: token issuance, lazy expiry, invalidation.

Time is driven by FakeClock so the 24h TTL is exercised without waiting.
"""

import threading

import pytest

from store import SessionStore


HOUR_MS = 60 * 60 * 1000


class TestSessionStore:

    @pytest.fixture(autouse=True)
    def _setup(self, clock):
        self.clock = clock
        self.sessions = SessionStore(ttl_ms=24 * HOUR_MS, clock=self.clock)

    def test_create_returns_valid_token(self):
        token = self.sessions.create("admin")
        session = self.sessions.validate(token)
        assert session is not None
        assert session.username == "admin"
        assert session.login_time == self.clock.now

    def test_tokens_are_unique_and_opaque(self):
        tokens = {self.sessions.create("admin") for _ in range(200)}
        assert len(tokens) == 200
        assert all(len(t) >= 32 for t in tokens)
        assert not any(t.isdigit() for t in tokens)

    def test_unknown_or_missing_token_rejected(self):
        self.sessions.create("admin")
        assert self.sessions.validate("not-a-token") is None
        assert self.sessions.validate("") is None
        assert self.sessions.validate(None) is None

    def test_valid_right_at_ttl_boundary(self):
        token = self.sessions.create("admin")
        self.clock.advance_hours(24)
        assert self.sessions.validate(token) is not None

    def test_expired_token_rejected_and_evicted(self):
        token = self.sessions.create("admin")
        self.clock.now += 24 * HOUR_MS + 1
        assert self.sessions.validate(token) is None
        assert token not in self.sessions
        # Still gone even if the clock were rewound
        self.clock.now -= 2 * HOUR_MS
        assert self.sessions.validate(token) is None

    def test_invalidate_is_idempotent(self):
        token = self.sessions.create("admin")
        self.sessions.invalidate(token)
        self.sessions.invalidate(token)
        self.sessions.invalidate(None)
        assert self.sessions.validate(token) is None

    def test_clear_all(self):
        tokens = [self.sessions.create("admin") for _ in range(3)]
        self.sessions.clear_all()
        assert len(self.sessions) == 0
        assert all(self.sessions.validate(t) is None for t in tokens)

    def test_purge_expired_only_drops_stale(self):
        old = self.sessions.create("admin")
        self.clock.advance_hours(20)
        fresh = self.sessions.create("admin")
        self.clock.advance_hours(5)

        assert self.sessions.purge_expired() == 1
        assert old not in self.sessions
        assert self.sessions.validate(fresh) is not None


class TestConcurrentEviction:

    def test_two_threads_evicting_same_token(self, clock):
        sessions = SessionStore(ttl_ms=HOUR_MS, clock=clock)
        token = sessions.create("admin")
        clock.advance_hours(2)

        # Both threads read the entry before either evicts it
        barrier = threading.Barrier(2, timeout=5)

        def blocking_clock():
            barrier.wait()
            return clock.now

        sessions.clock = blocking_clock
        results, errors = [], []

        def check():
            try:
                results.append(sessions.validate(token))
            except Exception as exc:
                errors.append(exc)

        threads = [threading.Thread(target=check) for _ in range(2)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert results == [None, None]
        assert token not in sessions
