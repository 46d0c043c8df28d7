"""Request outcome models."""

from dataclasses import dataclass
from enum import Enum

from .trace import Trace


class OutcomeKind(str, Enum):
    """Terminal result of a trace lookup."""

    SUCCESS = "success"
    VALIDATION_FAILURE = "validation_failure"
    UNKNOWN_CLUSTER = "unknown_cluster"
    NO_MATCH = "no_match"
    AMBIGUOUS_MATCH = "ambiguous_match"
    STORE_FAILURE = "store_failure"

    @property
    def status_code(self) -> int:
        """HTTP status class for this outcome."""
        return _STATUS_CODES[self]


_STATUS_CODES = {
    OutcomeKind.SUCCESS: 200,
    OutcomeKind.VALIDATION_FAILURE: 400,
    OutcomeKind.UNKNOWN_CLUSTER: 404,
    OutcomeKind.NO_MATCH: 404,
    # A multi-match breaks the correlation invariant; not the caller's fault.
    OutcomeKind.AMBIGUOUS_MATCH: 500,
    OutcomeKind.STORE_FAILURE: 500,
}


class ErrorCategory(str, Enum):
    """Metric label recorded for each failed request."""

    EMPTY_PARAM = "EmptyParam"
    INVALID_TIMESTAMP = "InvalidTimestamp"
    UNKNOWN_CLUSTER = "UnknownCluster"
    NO_TRACE_MATCH = "NoTraceMatch"
    MULTI_TRACE_MATCH = "MultiTraceMatch"
    TRACE_ERROR = "TraceError"


@dataclass(frozen=True)
class RequestOutcome:
    """Discriminated result: a trace on success, a category on failure."""

    kind: OutcomeKind
    trace: Trace | None = None
    category: ErrorCategory | None = None
    message: str = ""

    @classmethod
    def success(cls, trace: Trace) -> "RequestOutcome":
        return cls(kind=OutcomeKind.SUCCESS, trace=trace)

    @classmethod
    def failure(
        cls, kind: OutcomeKind, category: ErrorCategory, message: str
    ) -> "RequestOutcome":
        if kind is OutcomeKind.SUCCESS:
            raise ValueError("failure outcome cannot have kind SUCCESS")
        return cls(kind=kind, category=category, message=message)

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS

    @property
    def status_code(self) -> int:
        return self.kind.status_code
