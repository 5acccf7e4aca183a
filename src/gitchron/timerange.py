"""Parsing of --since/--until values into a TimeRange."""

import re
from datetime import datetime, timezone
from typing import Optional

from gitchron.exceptions import InvalidDateFormat
from gitchron.models import MAX_TIMESTAMP, MIN_TIMESTAMP, TimeRange

# RFC 3339 requires a full time and an explicit offset.
_RFC3339 = re.compile(
    r"^(\d{4}-\d{2}-\d{2})[Tt ](\d{2}:\d{2}:\d{2}(?:\.\d+)?)([Zz]|[+-]\d{2}:\d{2})$"
)


def _parse_rfc3339(value: str) -> Optional[int]:
    match = _RFC3339.match(value)
    if match is None:
        return None

    day, clock, offset = match.groups()
    # Sub-second precision is dropped; timestamps are whole seconds.
    clock = clock.split(".")[0]
    if offset in ("Z", "z"):
        offset = "+00:00"
    try:
        parsed = datetime.fromisoformat(f"{day}T{clock}{offset}")
    except ValueError:
        return None
    return int(parsed.timestamp())


def _parse_date(value: str) -> Optional[int]:
    try:
        parsed = datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        return None
    return int(parsed.replace(tzinfo=timezone.utc).timestamp())


def parse_lenient(value: str) -> int:
    """Parse a date string into epoch seconds.

    Accepts an RFC 3339 timestamp (``2024-01-15T10:30:00Z``,
    ``2024-01-15T10:30:00+02:00``) or a bare ``YYYY-MM-DD`` date, which is
    taken as midnight UTC.

    Raises:
        InvalidDateFormat: If neither format matches
    """
    timestamp = _parse_rfc3339(value)
    if timestamp is None:
        timestamp = _parse_date(value)
    if timestamp is None:
        raise InvalidDateFormat(value)
    return timestamp


def parse_time_range(since: Optional[str] = None, until: Optional[str] = None) -> TimeRange:
    """Build an inclusive TimeRange from optional date strings.

    A missing lower bound means the epoch, a missing upper bound means the
    largest signed 64-bit value.
    """
    return TimeRange(
        since=parse_lenient(since) if since is not None else MIN_TIMESTAMP,
        until=parse_lenient(until) if until is not None else MAX_TIMESTAMP,
    )
