"""In-memory trace store, for local development and tests."""

import json
from pathlib import Path

from ..logging_config import get_logger
from ..models import Span, Trace, TraceQuery
from .base import StoreError
from .jaeger_json import DecodeError, decode_traces

logger = get_logger(__name__)


def span_matches(span: Span, query: TraceQuery) -> bool:
    """Whether a single span satisfies the service, operation, tag and window filters."""
    if query.service_name and span.service_name != query.service_name:
        return False
    if query.operation_name and span.operation_name != query.operation_name:
        return False
    if not query.window.contains(span.start_time):
        return False
    for key, value in query.tags.items():
        if not any(tag.key == key and str(tag.value) == value for tag in span.tags):
            return False
    return True


class InMemoryTraceStore:
    """Holds a fixed list of traces and answers queries over them."""

    def __init__(self, traces: list[Trace] | None = None):
        self._traces: dict[str, Trace] = {}
        for trace in traces or []:
            self.add(trace)

    @classmethod
    def from_file(cls, path: str | Path) -> "InMemoryTraceStore":
        """Load traces from a Jaeger JSON document (``{"data": [...]}``)."""
        try:
            payload = json.loads(Path(path).read_text(encoding="utf-8"))
            traces = decode_traces(payload)
        except (OSError, json.JSONDecodeError, DecodeError) as e:
            raise StoreError(f"failed to load traces from {path}: {e}") from e
        logger.info("Loaded %d traces from %s", len(traces), path)
        return cls(traces)

    def add(self, trace: Trace) -> None:
        """Add a trace, replacing any trace with the same ID."""
        if trace.trace_id is None:
            raise ValueError("cannot store a trace without spans")
        self._traces[trace.trace_id] = trace

    async def find_traces(self, query: TraceQuery) -> list[Trace]:
        matches = [
            trace
            for trace in self._traces.values()
            if any(span_matches(span, query) for span in trace.spans)
        ]
        return matches[: query.limit]

    async def get_trace(self, trace_id: str) -> Trace:
        try:
            return self._traces[trace_id]
        except KeyError:
            raise StoreError(f"trace {trace_id} not found") from None

    async def close(self) -> None:
        return
