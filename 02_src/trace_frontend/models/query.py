"""Request and query data models."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta

WINDOW_SIZE = timedelta(minutes=30)


@dataclass(frozen=True)
class TraceRequest:
    """Raw caller input, as decoded from the transport."""

    cluster: str = ""
    resource: str = ""
    namespace: str = ""
    name: str = ""
    ts: str = ""
    span_type: str = ""  # optional prune category

    def summary(self) -> dict:
        """Fields worth recording alongside the request outcome."""
        return {
            "cluster": self.cluster,
            "resource": self.resource,
            "namespace": self.namespace,
            "name": self.name,
            "ts": self.ts,
        }


@dataclass(frozen=True)
class LogicalIdentity:
    """The Kubernetes object whose activity is being looked up."""

    cluster: str
    resource: str
    name: str
    timestamp: datetime
    namespace: str | None = None

    def __post_init__(self) -> None:
        if not self.cluster or not self.resource or not self.name:
            raise ValueError("cluster, resource and name must be non-empty")


@dataclass(frozen=True)
class TimeWindow:
    """Half-open interval [start, end)."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.end - self.start != WINDOW_SIZE:
            raise ValueError(f"time window must span exactly {WINDOW_SIZE}")

    def contains(self, instant: datetime) -> bool:
        return self.start <= instant < self.end


@dataclass(frozen=True)
class TraceQuery:
    """Tag-based range query against the trace store."""

    service_name: str
    operation_name: str
    window: TimeWindow
    tags: dict[str, str] = field(default_factory=dict)
    limit: int = 20
