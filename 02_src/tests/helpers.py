"""Builders for trace test data."""

from datetime import datetime, timedelta, timezone

from trace_frontend.config import DEFAULT_SERVICE_NAME
from trace_frontend.models import LogEntry, Span, Trace

T0 = datetime(2023, 1, 1, 10, 5, tzinfo=timezone.utc)


def make_log(offset_seconds: int = 0, **fields) -> LogEntry:
    return LogEntry(timestamp=T0 + timedelta(seconds=offset_seconds), fields=fields)


def make_span(
    trace_id: str = "trace1",
    span_id: str = "span1",
    operation_name: str = "prod",
    service_name: str = DEFAULT_SERVICE_NAME,
    start_time: datetime = T0,
    tags: dict | None = None,
    logs: list[LogEntry] | None = None,
) -> Span:
    return Span(
        trace_id=trace_id,
        span_id=span_id,
        operation_name=operation_name,
        service_name=service_name,
        start_time=start_time,
        duration=timedelta(seconds=1),
        tags=tags if tags is not None else {"resource": "pods", "name": "foo-123"},
        logs=logs or [],
    )


def make_trace(trace_id: str = "trace1", *spans: Span) -> Trace:
    if not spans:
        spans = (make_span(trace_id=trace_id),)
    return Trace(spans=list(spans))
