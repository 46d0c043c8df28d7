"""Core data models for the trace frontend."""

from .outcome import ErrorCategory, OutcomeKind, RequestOutcome
from .query import (
    WINDOW_SIZE,
    LogicalIdentity,
    TimeWindow,
    TraceQuery,
    TraceRequest,
)
from .trace import KeyValue, KeyValues, LogEntry, Span, SpanReference, Trace

__all__ = [
    # Traces
    "Trace",
    "Span",
    "SpanReference",
    "LogEntry",
    "KeyValue",
    "KeyValues",
    # Queries
    "TraceRequest",
    "LogicalIdentity",
    "TimeWindow",
    "TraceQuery",
    "WINDOW_SIZE",
    # Outcomes
    "OutcomeKind",
    "ErrorCategory",
    "RequestOutcome",
]
