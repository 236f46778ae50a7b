"""Until-timestamp computation.

An until value is one of:
    - a duration such as ``10m`` or ``1h30m``, meaning "that long before now"
    - an RFC3339-like timestamp such as ``2024-05-01``, ``2024-05-01T12:30``
      or ``2024-05-01T12:30:00.5+02:00``
    - a Unix timestamp such as ``1714564800`` or ``1714564800.25``

Functions:
    parse_duration: Parse a Go-style duration string into a timedelta.
    compute_until_instant: Turn until filter values into an absolute instant.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from datetime import datetime, timedelta, timezone

from dateutil.parser import isoparse

from podfilter.errors import TimestampError

_DURATION_UNITS: dict[str, float] = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,  # U+00B5 micro sign
    "μs": 1e-6,  # U+03BC greek mu
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_DURATION_PART_RE = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)")
_DURATION_RE = re.compile(r"(?:(?:\d+(?:\.\d*)?|\.\d+)(?:ns|us|µs|μs|ms|s|m|h))+")
_UNIX_RE = re.compile(r"(\d+)(?:\.(\d+))?")


def parse_duration(value: str) -> timedelta:
    """Parse a Go-style duration string.

    A duration is an optional sign followed by one or more decimal numbers,
    each with a unit suffix, e.g. ``300ms``, ``-1.5h`` or ``2h45m``. The
    unsigned string ``0`` is also a valid (zero) duration.

    Args:
        value: Duration string.

    Returns:
        The parsed timedelta.

    Raises:
        ValueError: If value is not a valid duration.
    """
    body = value
    sign = 1
    if body[:1] in ("+", "-"):
        sign = -1 if body[0] == "-" else 1
        body = body[1:]

    if body == "0":
        return timedelta(0)
    if not _DURATION_RE.fullmatch(body):
        raise ValueError(f"invalid duration {value!r}")

    seconds = sum(
        float(number) * _DURATION_UNITS[unit] for number, unit in _DURATION_PART_RE.findall(body)
    )
    try:
        return timedelta(seconds=sign * seconds)
    except OverflowError as e:
        raise ValueError(f"invalid duration {value!r}: {e}") from e


def _parse_unix(value: str) -> datetime | None:
    match = _UNIX_RE.fullmatch(value)
    if match is None:
        return None
    seconds, fraction = match.groups()
    instant = datetime.fromtimestamp(int(seconds), tz=timezone.utc)
    if fraction:
        # Fraction digits are scaled to nanoseconds, then truncated to microseconds
        nanos = int(fraction[:9].ljust(9, "0"))
        instant += timedelta(microseconds=nanos // 1000)
    return instant


def compute_until_instant(values: Sequence[str], now: datetime | None = None) -> datetime:
    """Compute the absolute instant described by until filter values.

    Args:
        values: Filter values; exactly one is required.
        now: Reference time for durations and for the zone of zoneless
            timestamps. Defaults to the current UTC time.

    Returns:
        A timezone-aware datetime.

    Raises:
        TimestampError: If the number of values is wrong or the value cannot
            be parsed as a duration, timestamp or Unix time.
    """
    if len(values) != 1:
        raise TimestampError("specify exactly one timestamp for until")
    if now is None:
        now = datetime.now(timezone.utc)

    value = values[0]
    if value != "0":
        try:
            delta = parse_duration(value)
        except ValueError:
            delta = None
        if delta is not None:
            try:
                return now - delta
            except OverflowError as e:
                raise TimestampError(f"duration {value!r} is out of range: {e}") from e

    if "-" in value:
        try:
            instant = isoparse(value)
        except (ValueError, OverflowError) as e:
            raise TimestampError(f"failed to parse timestamp {value!r}: {e}") from e
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=now.tzinfo or timezone.utc)
        return instant

    try:
        instant = _parse_unix(value)
    except (ValueError, OverflowError, OSError) as e:
        raise TimestampError(f"failed to parse value as time or duration: {value!r}") from e
    if instant is None:
        raise TimestampError(f"failed to parse value as time or duration: {value!r}")
    return instant


__all__ = ["parse_duration", "compute_until_instant"]
