import pytest
from fastapi.testclient import TestClient

import store
from storage.sqlite import MEMORY, SQLiteStorage


class FakeClock:
    """Millisecond clock the tests can move forward by hand."""

    def __init__(self, start: int = 1_700_000_000_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance_hours(self, hours: float) -> None:
        self.now += int(hours * 60 * 60 * 1000)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def client(monkeypatch, clock):
    """API client over a fresh in-memory database and session map."""
    from main import app

    monkeypatch.setattr(store, "database", SQLiteStorage(MEMORY))
    monkeypatch.setattr(store, "sessions", store.SessionStore(clock=clock))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers(client):
    resp = client.post("/api/login", json={"username": "admin", "password": "admin123"})
    assert resp.status_code == 200
    return {"X-Session-ID": resp.json()["sessionId"]}
