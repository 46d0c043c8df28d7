"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from trace_frontend.models import Trace, TraceQuery  # noqa: E402
from trace_frontend.store import StoreError  # noqa: E402


class RecordingTraceStore:
    """Fake trace store that records every call."""

    def __init__(self):
        self.found: list[Trace] = []
        self.by_id: dict[str, Trace] = {}
        self.find_error: StoreError | None = None
        self.get_error: StoreError | None = None
        self.find_calls: list[TraceQuery] = []
        self.get_calls: list[str] = []
        self.closed = False

    @property
    def call_count(self) -> int:
        return len(self.find_calls) + len(self.get_calls)

    async def find_traces(self, query: TraceQuery) -> list[Trace]:
        self.find_calls.append(query)
        if self.find_error:
            raise self.find_error
        return list(self.found)

    async def get_trace(self, trace_id: str) -> Trace:
        self.get_calls.append(trace_id)
        if self.get_error:
            raise self.get_error
        if trace_id not in self.by_id:
            raise StoreError(f"trace {trace_id} not found")
        return self.by_id[trace_id]

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def store():
    """Create recording fake store."""
    return RecordingTraceStore()


@pytest.fixture
def registry():
    """Create registry with a couple of known clusters."""
    from trace_frontend.clusters import StaticClusterRegistry

    return StaticClusterRegistry(["prod", "Staging"])


@pytest.fixture
def locator(store, registry):
    """Create TraceLocator over the fake store."""
    from trace_frontend.resolver import TraceLocator

    return TraceLocator(store=store, registry=registry)


@pytest.fixture
def refetcher(store):
    """Create CompletenessRefetcher over the fake store."""
    from trace_frontend.resolver import CompletenessRefetcher

    return CompletenessRefetcher(store)


@pytest.fixture
def resolver(locator, refetcher):
    """Create TraceResolver."""
    from trace_frontend.resolver import TraceResolver

    return TraceResolver(locator, refetcher)


@pytest.fixture
def trace_request():
    """Valid request for pods/foo-123 in prod."""
    from trace_frontend.models import TraceRequest

    return TraceRequest(
        cluster="prod",
        resource="pods",
        name="foo-123",
        ts="2023-01-01T10:05:00Z",
    )
