"""Object trace frontend."""

from .app import Application, IApplication
from .clusters import IClusterRegistry, StaticClusterRegistry
from .config import Settings
from .models import (
    ErrorCategory,
    LogEntry,
    LogicalIdentity,
    OutcomeKind,
    RequestOutcome,
    Span,
    SpanReference,
    TimeWindow,
    Trace,
    TraceQuery,
    TraceRequest,
)
from .render import to_display_format
from .resolver import (
    CompletenessRefetcher,
    ITraceResolver,
    TraceLocator,
    TraceResolver,
    bucket,
    prune_trace,
)
from .store import InMemoryTraceStore, ITraceStore, JaegerQueryStore, StoreError
from .tracker import IRequestTracker, RequestTracker

__all__ = [
    # Application
    "Application",
    "IApplication",
    "Settings",
    # Models
    "Trace",
    "Span",
    "SpanReference",
    "LogEntry",
    "TraceRequest",
    "LogicalIdentity",
    "TimeWindow",
    "TraceQuery",
    "OutcomeKind",
    "ErrorCategory",
    "RequestOutcome",
    # Components
    "ITraceStore",
    "InMemoryTraceStore",
    "JaegerQueryStore",
    "StoreError",
    "IClusterRegistry",
    "StaticClusterRegistry",
    "TraceLocator",
    "CompletenessRefetcher",
    "ITraceResolver",
    "TraceResolver",
    "bucket",
    "prune_trace",
    "to_display_format",
    "IRequestTracker",
    "RequestTracker",
]
