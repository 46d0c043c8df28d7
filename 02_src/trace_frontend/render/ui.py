"""Rendering of traces for the Jaeger UI."""

from ..models import Trace
from ..store.jaeger_json import trace_to_json


def to_display_format(trace: Trace) -> dict:
    """Convert a trace into the document the Jaeger UI renders."""
    return trace_to_json(trace)
