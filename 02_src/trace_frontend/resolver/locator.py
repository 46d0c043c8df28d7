"""Trace locator: maps an object identity to exactly one trace."""

from ..clusters import IClusterRegistry, has_cluster
from ..config import DEFAULT_SERVICE_NAME
from ..logging_config import get_logger
from ..models import (
    ErrorCategory,
    LogicalIdentity,
    OutcomeKind,
    RequestOutcome,
    TimeWindow,
    TraceQuery,
    TraceRequest,
)
from ..store import ITraceStore, StoreError
from .window import InvalidTimestamp, bucket, parse_timestamp

logger = get_logger(__name__)


class TraceLocator:
    """Builds a tag query from an identity and enforces an exactly-one match."""

    def __init__(
        self,
        store: ITraceStore,
        registry: IClusterRegistry,
        service_name: str = DEFAULT_SERVICE_NAME,
        query_limit: int = 20,
    ):
        self._store = store
        self._registry = registry
        self._service_name = service_name
        self._query_limit = query_limit

    def build_query(self, identity: LogicalIdentity, window: TimeWindow) -> TraceQuery:
        """Derive the store query for an identity within a window."""
        tags = {"resource": identity.resource, "name": identity.name}
        if identity.namespace:
            tags["namespace"] = identity.namespace

        return TraceQuery(
            service_name=self._service_name,
            operation_name=identity.cluster,
            window=window,
            tags=tags,
            limit=self._query_limit,
        )

    async def locate(self, request: TraceRequest) -> RequestOutcome:
        """Find the single trace for the requested object."""
        if not request.cluster or not request.resource or not request.name:
            return RequestOutcome.failure(
                OutcomeKind.VALIDATION_FAILURE,
                ErrorCategory.EMPTY_PARAM,
                "cluster or resource or name is empty",
            )

        if not has_cluster(self._registry, request.cluster):
            return RequestOutcome.failure(
                OutcomeKind.UNKNOWN_CLUSTER,
                ErrorCategory.UNKNOWN_CLUSTER,
                f"cluster {request.cluster} not supported now",
            )

        try:
            timestamp = parse_timestamp(request.ts)
            window = bucket(timestamp)
        except InvalidTimestamp as e:
            return RequestOutcome.failure(
                OutcomeKind.VALIDATION_FAILURE,
                ErrorCategory.INVALID_TIMESTAMP,
                f"invalid timestamp for ts param: {e}",
            )

        identity = LogicalIdentity(
            cluster=request.cluster,
            resource=request.resource,
            namespace=request.namespace or None,
            name=request.name,
            timestamp=timestamp,
        )
        query = self.build_query(identity, window)
        logger.debug(
            "Searching traces",
            extra={
                "context": {
                    "operation": query.operation_name,
                    "tags": query.tags,
                    "start": window.start.isoformat(),
                    "end": window.end.isoformat(),
                }
            },
        )

        try:
            traces = await self._store.find_traces(query)
        except StoreError as e:
            return RequestOutcome.failure(
                OutcomeKind.STORE_FAILURE,
                ErrorCategory.TRACE_ERROR,
                f"failed to find trace ids: {e}",
            )

        if len(traces) > 1:
            return RequestOutcome.failure(
                OutcomeKind.AMBIGUOUS_MATCH,
                ErrorCategory.MULTI_TRACE_MATCH,
                f"trace ids match query length is {len(traces)}, not 1",
            )
        if not traces:
            return RequestOutcome.failure(
                OutcomeKind.NO_MATCH,
                ErrorCategory.NO_TRACE_MATCH,
                "could not find trace ids that match query",
            )
        return RequestOutcome.success(traces[0])
