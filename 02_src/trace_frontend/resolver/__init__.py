"""Trace resolution pipeline."""

from .locator import TraceLocator
from .orchestrator import ITraceResolver, TraceResolver
from .prune import prune_trace
from .refetch import CompletenessRefetcher
from .window import InvalidTimestamp, bucket, parse_timestamp

__all__ = [
    "TraceLocator",
    "CompletenessRefetcher",
    "ITraceResolver",
    "TraceResolver",
    "prune_trace",
    "bucket",
    "parse_timestamp",
    "InvalidTimestamp",
]
