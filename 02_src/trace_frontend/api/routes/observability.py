"""Observability API routes."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel
from fastapi import APIRouter, HTTPException

from ...app import IApplication


class RequestRecordResponse(BaseModel):
    """Response model for a tracked request."""

    id: str
    outcome: str
    category: str | None
    status_code: int
    duration_ms: float
    query: dict[str, Any]
    timestamp: datetime


class RequestStatsResponse(BaseModel):
    """Response model for request counters."""

    total: int
    by_outcome: dict[str, int]
    by_category: dict[str, int]
    recent: list[RequestRecordResponse]


class StatusResponse(BaseModel):
    """Response model for status."""

    status: str


def create_observability_router(app: IApplication) -> APIRouter:
    """Create observability router."""
    router = APIRouter(tags=["observability"])

    @router.get("/api/request-stats", response_model=RequestStatsResponse)
    async def get_request_stats() -> dict:
        """Get per-outcome and per-category request counters."""
        try:
            snapshot = app.tracker.snapshot()
        except RuntimeError as e:
            raise HTTPException(status_code=503, detail=str(e))

        return {
            **snapshot,
            "recent": [
                {
                    "id": r.id,
                    "outcome": r.outcome,
                    "category": r.category,
                    "status_code": r.status_code,
                    "duration_ms": r.duration_ms,
                    "query": r.query,
                    "timestamp": r.timestamp,
                }
                for r in snapshot["recent"]
            ],
        }

    @router.get("/health", response_model=StatusResponse)
    async def health() -> dict:
        return {"status": "ok"}

    return router
