"""In-memory trace data models."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Iterable, Mapping


def infer_value_type(value: Any) -> str:
    """Jaeger value type for a Python value."""
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int64"
    if isinstance(value, float):
        return "float64"
    if isinstance(value, (bytes, bytearray)):
        return "binary"
    return "string"


@dataclass
class KeyValue:
    """A typed tag or log field."""

    key: str
    value: Any
    type: str = ""  # "string", "bool", "int64", "float64" or "binary"

    def __post_init__(self) -> None:
        if not self.type:
            self.type = infer_value_type(self.value)


class KeyValues(list):
    """Ordered key-value list; keys may repeat."""

    @classmethod
    def coerce(cls, values: "Mapping[str, Any] | Iterable[KeyValue] | None") -> "KeyValues":
        """Accept a mapping or an iterable of KeyValue."""
        if isinstance(values, cls):
            return values
        if values is None:
            return cls()
        if isinstance(values, Mapping):
            return cls(KeyValue(key, value) for key, value in values.items())
        return cls(values)

    def find(self, key: str) -> KeyValue | None:
        """First entry with the given key."""
        for item in self:
            if item.key == key:
                return item
        return None

    def get(self, key: str, default: Any = None) -> Any:
        item = self.find(key)
        return default if item is None else item.value

    def as_dict(self) -> dict[str, Any]:
        """Mapping view; later duplicates win."""
        return {item.key: item.value for item in self}


@dataclass
class LogEntry:
    """A timestamped, tagged annotation attached to a span."""

    timestamp: datetime
    fields: KeyValues = field(default_factory=KeyValues)

    def __post_init__(self) -> None:
        self.fields = KeyValues.coerce(self.fields)


@dataclass
class SpanReference:
    """A causal link from one span to another."""

    ref_type: str  # "CHILD_OF" or "FOLLOWS_FROM"
    trace_id: str
    span_id: str


@dataclass
class Span:
    """A single timed operation within a trace."""

    trace_id: str
    span_id: str
    operation_name: str
    service_name: str
    start_time: datetime
    duration: timedelta = timedelta(0)
    tags: KeyValues = field(default_factory=KeyValues)
    logs: list[LogEntry] = field(default_factory=list)
    references: list[SpanReference] = field(default_factory=list)
    process_tags: KeyValues = field(default_factory=KeyValues)
    flags: int = 0

    def __post_init__(self) -> None:
        self.tags = KeyValues.coerce(self.tags)
        self.process_tags = KeyValues.coerce(self.process_tags)


@dataclass
class Trace:
    """A causally-linked collection of spans."""

    spans: list[Span] = field(default_factory=list)

    @property
    def trace_id(self) -> str | None:
        """ID shared by the spans, or None for an empty trace."""
        return self.spans[0].trace_id if self.spans else None

    def has_logs(self) -> bool:
        """Whether at least one span carries a log entry."""
        return any(span.logs for span in self.spans)
