"""Trace lookup API routes."""

from typing import Any

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import JSONResponse

from ...app import IApplication
from ...logging_config import bind_logger, get_logger
from ...models import TraceRequest
from ...render import to_display_format

logger = get_logger(__name__)

TRACE_PATH = "/extensions/api/v1/trace"


def create_trace_router(app: IApplication) -> APIRouter:
    """Create trace router."""
    router = APIRouter(tags=["trace"])

    @router.get(TRACE_PATH)
    async def get_trace(
        request: Request,
        cluster: str = Query("", description="Cluster name"),
        resource: str = Query("", description="Resource kind, e.g. pods"),
        namespace: str = Query("", description="Namespace, empty for cluster-scoped objects"),
        name: str = Query("", description="Object name"),
        ts: str = Query("", description="RFC 3339 timestamp"),
        span_type: str = Query("", description="Only keep logs carrying this field"),
    ) -> Any:
        """Find the single trace of an object around a timestamp."""
        source = request.client.host if request.client else "unknown"
        log = bind_logger(logger, source=source, query=request.url.query)
        log.info("GET %s", TRACE_PATH)

        trace_request = TraceRequest(
            cluster=cluster,
            resource=resource,
            namespace=namespace,
            name=name,
            ts=ts,
            span_type=span_type,
        )

        started_at = app.tracker.clock()
        try:
            outcome = await app.resolver.resolve(trace_request)
        except Exception as e:
            log.exception("Unhandled error resolving trace")
            app.tracker.record_exception(e, started_at, trace_request.summary())
            raise HTTPException(status_code=500, detail=str(e))

        app.tracker.record(outcome, started_at, trace_request.summary())

        if not outcome.ok:
            log.error(outcome.message, extra={"context": {"category": outcome.category.value}})
            return JSONResponse(
                status_code=outcome.status_code,
                content={"detail": outcome.message, "category": outcome.category.value},
            )

        return to_display_format(outcome.trace)

    return router
