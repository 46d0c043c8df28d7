"""Tracker implementation for per-request outcome records."""

import uuid
from collections import Counter, deque
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Protocol

from ..logging_config import get_logger
from ..models import RequestOutcome

logger = get_logger(__name__)

Clock = Callable[[], datetime]

# Labels for requests that raised instead of producing an outcome
INTERNAL_ERROR_OUTCOME = "internal_error"
INTERNAL_ERROR_CATEGORY = "InternalError"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class RequestRecord:
    """A single observed trace request."""

    id: str
    outcome: str  # OutcomeKind value, or "internal_error"
    category: str | None  # ErrorCategory value, or "InternalError"
    status_code: int
    duration_ms: float
    query: dict
    timestamp: datetime


class IRequestTracker(Protocol):
    """Recording of request outcomes, labelled by error category."""

    @property
    def clock(self) -> Clock:
        """Time source used for request durations."""
        ...

    def record(
        self, outcome: RequestOutcome, started_at: datetime, query: dict
    ) -> RequestRecord:
        """Record the outcome of one request."""
        ...

    def record_exception(
        self, exc: BaseException, started_at: datetime, query: dict
    ) -> RequestRecord:
        """Record a request that failed with an unhandled exception."""
        ...

    def snapshot(self) -> dict:
        """Counters and recent records."""
        ...


class RequestTracker:
    """Keeps per-category counters and a bounded history of requests."""

    def __init__(self, clock: Clock = utc_now, history_size: int = 100):
        self._clock = clock
        self._records: deque[RequestRecord] = deque(maxlen=history_size)
        self._by_outcome: Counter[str] = Counter()
        self._by_category: Counter[str] = Counter()

    @property
    def clock(self) -> Clock:
        return self._clock

    def record(
        self, outcome: RequestOutcome, started_at: datetime, query: dict
    ) -> RequestRecord:
        """Create a RequestRecord and update counters."""
        category = outcome.category.value if outcome.category else None
        return self._append(
            outcome.kind.value, category, outcome.status_code, started_at, query
        )

    def record_exception(
        self, exc: BaseException, started_at: datetime, query: dict
    ) -> RequestRecord:
        """Count an unhandled exception as an internal error."""
        return self._append(
            INTERNAL_ERROR_OUTCOME,
            INTERNAL_ERROR_CATEGORY,
            500,
            started_at,
            query,
            error=f"{type(exc).__name__}: {exc}",
        )

    def _append(
        self,
        outcome: str,
        category: str | None,
        status_code: int,
        started_at: datetime,
        query: dict,
        error: str | None = None,
    ) -> RequestRecord:
        now = self._clock()
        record = RequestRecord(
            id=str(uuid.uuid4()),
            outcome=outcome,
            category=category,
            status_code=status_code,
            duration_ms=(now - started_at).total_seconds() * 1000,
            query=query,
            timestamp=now,
        )
        self._records.append(record)
        self._by_outcome[record.outcome] += 1
        if category:
            self._by_category[category] += 1

        logger.info(
            "Trace request finished with %s",
            record.outcome,
            extra={
                "context": {
                    "request_id": record.id,
                    "category": category,
                    "status_code": record.status_code,
                    "duration_ms": record.duration_ms,
                    "error": error,
                }
            },
        )
        return record

    def snapshot(self) -> dict:
        return {
            "total": sum(self._by_outcome.values()),
            "by_outcome": dict(self._by_outcome),
            "by_category": dict(self._by_category),
            "recent": list(self._records),
        }
