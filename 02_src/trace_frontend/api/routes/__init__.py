"""API route factories."""

from .observability import create_observability_router
from .trace import TRACE_PATH, create_trace_router

__all__ = ["TRACE_PATH", "create_observability_router", "create_trace_router"]
