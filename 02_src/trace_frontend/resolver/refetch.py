"""Completeness refetch for traces returned without logs."""

from ..logging_config import get_logger
from ..models import ErrorCategory, OutcomeKind, RequestOutcome, Trace
from ..store import ITraceStore, StoreError

logger = get_logger(__name__)


class CompletenessRefetcher:
    """Re-fetches a trace by ID when the search result carries no logs.

    Search results may be a shallow projection of the stored trace. A
    single fetch by ID recovers the logs; it is never repeated.
    """

    def __init__(self, store: ITraceStore):
        self._store = store

    async def ensure_logs(self, trace: Trace) -> RequestOutcome:
        if not trace.spans or trace.has_logs():
            return RequestOutcome.success(trace)

        trace_id = trace.spans[0].trace_id
        logger.debug("Trace %s has no logs, refetching by ID", trace_id)
        try:
            full = await self._store.get_trace(trace_id)
        except StoreError as e:
            return RequestOutcome.failure(
                OutcomeKind.STORE_FAILURE,
                ErrorCategory.TRACE_ERROR,
                f"failed to fetch trace {trace_id}: {e}",
            )
        return RequestOutcome.success(full)
