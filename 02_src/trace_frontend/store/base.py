"""Trace store interface."""

from typing import Protocol

from ..models import Trace, TraceQuery


class StoreError(Exception):
    """A trace store call failed (transport, backend or lookup error)."""


class ITraceStore(Protocol):
    """Backend system of record for traces, queried by tags/time or by ID."""

    async def find_traces(self, query: TraceQuery) -> list[Trace]:
        """Find traces containing a span that matches the query."""
        ...

    async def get_trace(self, trace_id: str) -> Trace:
        """Fetch the full trace by ID."""
        ...

    async def close(self) -> None:
        """Release any held connections."""
        ...
