"""Timestamp parsing and normalization helpers."""
from __future__ import annotations

import re
from datetime import datetime, timezone

_RFC3339 = re.compile(
    r"([0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2})(?:\.([0-9]+))?(Z|[+-][0-9]{2}:[0-9]{2})"
)


def parse_rfc3339(value: str) -> datetime:
    """Parse an RFC 3339 date-time; the zone designator is mandatory.

    Fractions beyond microsecond precision are truncated. Raises ``ValueError``
    for anything else, including out-of-range fields such as month 13.
    """

    match = _RFC3339.fullmatch(value)
    if match is None:
        raise ValueError(f"not an RFC 3339 timestamp: {value!r}")
    base, fraction, offset = match.groups()
    normalized = base
    if fraction:
        normalized += "." + fraction[:6].ljust(6, "0")
    normalized += "+00:00" if offset == "Z" else offset
    return datetime.fromisoformat(normalized)


def ensure_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to naive datetimes read back from zone-less stores."""

    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)
