from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from tempero.core.store import MemoryStore
from tempero.main import create_app


class TickingClock:
    """Each call is one second after the previous, so ordering by time is deterministic."""

    def __init__(self, start: datetime = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self) -> datetime:
        self.now = self.now + timedelta(seconds=1)
        return self.now


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def store(clock):
    return MemoryStore(clock=clock)


@pytest.fixture
def client(store):
    app = create_app(store)
    with TestClient(app) as test_client:
        yield test_client
