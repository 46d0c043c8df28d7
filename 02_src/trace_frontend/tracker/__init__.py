"""Tracker module."""

from .tracker import (
    INTERNAL_ERROR_CATEGORY,
    INTERNAL_ERROR_OUTCOME,
    Clock,
    IRequestTracker,
    RequestRecord,
    RequestTracker,
    utc_now,
)

__all__ = [
    "INTERNAL_ERROR_CATEGORY",
    "INTERNAL_ERROR_OUTCOME",
    "Clock",
    "IRequestTracker",
    "RequestRecord",
    "RequestTracker",
    "utc_now",
]
