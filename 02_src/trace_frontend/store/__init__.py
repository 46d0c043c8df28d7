"""Trace store module."""

from .base import ITraceStore, StoreError
from .jaeger import JaegerQueryStore
from .memory import InMemoryTraceStore

__all__ = ["ITraceStore", "StoreError", "InMemoryTraceStore", "JaegerQueryStore"]
