"""
Pytest configuration and fixtures.
"""

import pytest
from fastapi.testclient import TestClient

from labelhub.main import app
from labelhub.models.print_job import Label
from labelhub.storage.print_job_store import PrintJobStore


class FakeClock:
    """Manually advanced epoch-millisecond clock."""

    def __init__(self, start_ms: int = 1_700_000_000_000):
        self.now_ms = start_ms

    def __call__(self) -> int:
        return self.now_ms

    def advance(self, ms: int) -> None:
        self.now_ms += ms


@pytest.fixture
def client():
    """FastAPI test client (runs the application lifespan)."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def fake_clock():
    """Controllable clock for expiry tests."""
    return FakeClock()


@pytest.fixture
def store(fake_clock):
    """Print job store with a 30 minute TTL on the fake clock."""
    job_store = PrintJobStore(ttl_ms=30 * 60 * 1000, clock=fake_clock)
    yield job_store
    job_store.shutdown()


@pytest.fixture
def sample_labels():
    """Three labels as submitted by the browser client."""
    return [
        Label(
            title="Charizard",
            variation="Holo",
            condition="Near Mint",
            identifier="https://cardhub-qr.vercel.app/p/BS-004",
            price="$350.00"
        ),
        Label(
            title="Blastoise",
            condition="Lightly Played",
            identifier="BS-002",
            price="$120.00"
        ),
        Label(
            title="Venusaur",
            identifier="BS-015",
            price="$95.00"
        ),
    ]


@pytest.fixture
def sample_labels_payload(sample_labels):
    """Sample labels as JSON-ready dicts."""
    return [label.model_dump(exclude_none=True) for label in sample_labels]
