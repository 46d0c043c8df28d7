"""Request orchestration: locate, complete, prune."""

from typing import Protocol

from ..logging_config import get_logger
from ..models import RequestOutcome, TraceRequest
from .locator import TraceLocator
from .prune import prune_trace
from .refetch import CompletenessRefetcher

logger = get_logger(__name__)


class ITraceResolver(Protocol):
    """Resolves a trace request to a terminal outcome."""

    async def resolve(self, request: TraceRequest) -> RequestOutcome:
        """Run the lookup pipeline for one request."""
        ...


class TraceResolver:
    """Linear pipeline; the first failing stage ends the request."""

    def __init__(self, locator: TraceLocator, refetcher: CompletenessRefetcher):
        self._locator = locator
        self._refetcher = refetcher

    async def resolve(self, request: TraceRequest) -> RequestOutcome:
        outcome = await self._locator.locate(request)
        if not outcome.ok:
            return outcome

        outcome = await self._refetcher.ensure_logs(outcome.trace)
        if not outcome.ok:
            return outcome

        trace = prune_trace(outcome.trace, request.span_type)
        logger.debug(
            "Resolved trace %s with %d spans", trace.trace_id, len(trace.spans)
        )
        return RequestOutcome.success(trace)
