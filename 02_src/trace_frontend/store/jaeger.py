"""Trace store backed by the Jaeger query HTTP API."""

import json

import httpx

from ..logging_config import get_logger
from ..models import Trace, TraceQuery
from .base import StoreError
from .jaeger_json import DecodeError, decode_traces, to_micros

logger = get_logger(__name__)


def build_search_params(query: TraceQuery) -> dict[str, str]:
    """Encode a TraceQuery as ``/api/traces`` search parameters."""
    params = {
        "service": query.service_name,
        "operation": query.operation_name,
        "start": str(to_micros(query.window.start)),
        "end": str(to_micros(query.window.end)),
        "limit": str(query.limit),
    }
    if query.tags:
        params["tags"] = json.dumps(query.tags, sort_keys=True)
    return params


class JaegerQueryStore:
    """Jaeger query service client.

    No retries are attempted; a failed call surfaces as StoreError. The
    timeout applies to each call independently.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        self._client = client or httpx.AsyncClient(
            base_url=base_url.rstrip("/"), timeout=timeout
        )

    async def find_traces(self, query: TraceQuery) -> list[Trace]:
        payload = await self._get("/api/traces", params=build_search_params(query))
        return self._decode(payload)

    async def get_trace(self, trace_id: str) -> Trace:
        payload = await self._get(f"/api/traces/{trace_id}")
        traces = self._decode(payload)
        if not traces:
            raise StoreError(f"trace {trace_id} not found")
        return traces[0]

    async def close(self) -> None:
        await self._client.aclose()

    async def _get(self, path: str, params: dict | None = None) -> dict:
        try:
            response = await self._client.get(path, params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            raise StoreError(
                f"jaeger query {path} returned {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise StoreError(f"jaeger query {path} failed: {e}") from e
        except ValueError as e:
            raise StoreError(f"jaeger query {path} returned invalid JSON") from e

        errors = payload.get("errors") if isinstance(payload, dict) else None
        if errors:
            messages = "; ".join(
                str(err.get("msg", err)) if isinstance(err, dict) else str(err)
                for err in errors
            )
            raise StoreError(f"jaeger query {path} reported errors: {messages}")
        return payload

    @staticmethod
    def _decode(payload: dict) -> list[Trace]:
        try:
            return decode_traces(payload)
        except DecodeError as e:
            raise StoreError(f"unexpected trace payload: {e}") from e
