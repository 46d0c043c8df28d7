"""Conversion between Jaeger UI JSON documents and trace models.

The Jaeger query service speaks this format on ``/api/traces`` and the
Jaeger UI consumes it, so the same codec backs both the HTTP store and
the renderer. Timestamps and durations are integer microseconds.
"""

import json
from datetime import datetime, timedelta, timezone

from ..models import KeyValue, KeyValues, LogEntry, Span, SpanReference, Trace

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class DecodeError(ValueError):
    """The document does not have the Jaeger trace shape."""


def to_micros(instant: datetime) -> int:
    return (instant - EPOCH) // timedelta(microseconds=1)


def from_micros(value: int) -> datetime:
    return EPOCH + timedelta(microseconds=value)


def decode_key_values(items: list[dict] | None) -> KeyValues:
    """Decode ``[{"key", "type", "value"}]``, keeping order, duplicates and types."""
    result = KeyValues()
    for item in items or []:
        try:
            result.append(
                KeyValue(
                    key=item["key"],
                    value=item.get("value"),
                    type=item.get("type") or "",
                )
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise DecodeError(f"malformed key-value entry: {item!r}") from e
    return result


def encode_key_values(values: KeyValues) -> list[dict]:
    return [{"key": kv.key, "type": kv.type, "value": kv.value} for kv in values]


def decode_trace(document: dict) -> Trace:
    """Decode one element of the ``data`` array."""
    try:
        processes = document.get("processes") or {}
        spans = []
        for raw in document.get("spans") or []:
            process = processes.get(raw.get("processID"), {})
            spans.append(
                Span(
                    trace_id=raw["traceID"],
                    span_id=raw["spanID"],
                    operation_name=raw.get("operationName", ""),
                    service_name=process.get("serviceName", ""),
                    start_time=from_micros(int(raw.get("startTime", 0))),
                    duration=timedelta(microseconds=int(raw.get("duration", 0))),
                    tags=decode_key_values(raw.get("tags")),
                    logs=[
                        LogEntry(
                            timestamp=from_micros(int(log.get("timestamp", 0))),
                            fields=decode_key_values(log.get("fields")),
                        )
                        for log in raw.get("logs") or []
                    ],
                    references=[
                        SpanReference(
                            ref_type=ref.get("refType", "CHILD_OF"),
                            trace_id=ref["traceID"],
                            span_id=ref["spanID"],
                        )
                        for ref in raw.get("references") or []
                    ],
                    process_tags=decode_key_values(process.get("tags")),
                    flags=int(raw.get("flags", 0)),
                )
            )
    except DecodeError:
        raise
    except (KeyError, TypeError, AttributeError, ValueError) as e:
        raise DecodeError(f"malformed trace document: {e}") from e
    return Trace(spans=spans)


def decode_traces(payload: dict) -> list[Trace]:
    """Decode a ``{"data": [...]}`` response body."""
    if not isinstance(payload, dict):
        raise DecodeError("expected a JSON object")
    return [decode_trace(item) for item in payload.get("data") or []]


def trace_to_json(trace: Trace) -> dict:
    """Encode a trace as a Jaeger UI document."""
    process_ids: dict[tuple[str, str], str] = {}
    processes: dict[str, dict] = {}
    spans = []

    for span in trace.spans:
        process_key = (
            span.service_name,
            json.dumps(encode_key_values(span.process_tags), default=str),
        )
        process_id = process_ids.get(process_key)
        if process_id is None:
            process_id = f"p{len(process_ids) + 1}"
            process_ids[process_key] = process_id
            processes[process_id] = {
                "serviceName": span.service_name,
                "tags": encode_key_values(span.process_tags),
            }

        spans.append(
            {
                "traceID": span.trace_id,
                "spanID": span.span_id,
                "flags": span.flags,
                "operationName": span.operation_name,
                "references": [
                    {
                        "refType": ref.ref_type,
                        "traceID": ref.trace_id,
                        "spanID": ref.span_id,
                    }
                    for ref in span.references
                ],
                "startTime": to_micros(span.start_time),
                "duration": span.duration // timedelta(microseconds=1),
                "tags": encode_key_values(span.tags),
                "logs": [
                    {
                        "timestamp": to_micros(log.timestamp),
                        "fields": encode_key_values(log.fields),
                    }
                    for log in span.logs
                ],
                "processID": process_id,
                "warnings": None,
            }
        )

    return {
        "traceID": trace.trace_id or "",
        "spans": spans,
        "processes": processes,
        "warnings": None,
    }
