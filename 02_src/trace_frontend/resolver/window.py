"""Timestamp parsing and half-hour bucketing."""

import re
from datetime import datetime, timedelta, timezone

from ..models import WINDOW_SIZE, TimeWindow

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_RFC3339 = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?"
    r"(?:(Z)|([+-])(\d{2}):(\d{2}))$"
)


class InvalidTimestamp(ValueError):
    """The timestamp is not valid RFC 3339 text."""


def parse_timestamp(text: str) -> datetime:
    """Parse an RFC 3339 timestamp into an aware datetime."""
    match = _RFC3339.fullmatch(text) if text else None
    if not match:
        raise InvalidTimestamp(f"cannot parse {text!r} as RFC 3339")

    year, month, day, hour, minute, second, fraction, zulu, sign, off_h, off_m = (
        match.groups()
    )
    if zulu:
        tz = timezone.utc
    else:
        offset = timedelta(hours=int(off_h), minutes=int(off_m))
        if offset >= timedelta(hours=24):
            raise InvalidTimestamp(f"offset out of range in {text!r}")
        tz = timezone(-offset if sign == "-" else offset)

    # Digits beyond microseconds are dropped
    micros = int((fraction or "0")[:6].ljust(6, "0"))
    try:
        return datetime(
            int(year), int(month), int(day),
            int(hour), int(minute), int(second), micros,
            tzinfo=tz,
        )
    except ValueError as e:
        raise InvalidTimestamp(f"invalid timestamp {text!r}: {e}") from e


def bucket(timestamp: datetime | str) -> TimeWindow:
    """Return the 30-minute window, aligned to the epoch, containing timestamp."""
    if isinstance(timestamp, str):
        timestamp = parse_timestamp(timestamp)
    if timestamp.tzinfo is None:
        raise InvalidTimestamp("timestamp must carry a timezone")

    start = timestamp - (timestamp - EPOCH) % WINDOW_SIZE
    return TimeWindow(start=start, end=start + WINDOW_SIZE)
