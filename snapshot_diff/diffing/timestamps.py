"""
Timestamp policy for time-like metadata fields.

A metadata key is treated as a timestamp when its name contains a marker
substring ("Time" by default). This is a naming-convention heuristic: a
non-time key such as "isTimely" would also match. It is kept in this one
predicate so a declared field-type list could replace it later.

Values must be ISO-8601 date-times with an explicit offset:

    2023-01-01T10:00:00+00:00
    2023-01-01T10:00Z
    2023-01-01T10:00:00.123456789-05:30

They are re-rendered in a target offset using the pattern
yyyy-MM-dd'T'HH:mm:ssX, where X is "Z" for a zero offset, "+HH" for whole
hours and "+HHMM" otherwise:

    format_in_offset(parse_offset_datetime("2023-01-01T10:00:00+00:00"),
                     timezone(timedelta(hours=2)))
    # '2023-01-01T12:00:00+02'
"""

import re
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from snapshot_diff.config import DEFAULT_TIME_FIELD_MARKER
from snapshot_diff.errors import TimestampParseError

_OFFSET_DATETIME = re.compile(
    r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"T(?P<hour>\d{2}):(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2})(?:\.(?P<fraction>\d{1,9}))?)?"
    r"(?P<offset>Z|[+-]\d{2}:\d{2}(?::\d{2})?)"
    r"\Z",
    re.ASCII
)


def is_time_field(name: str, marker: str = DEFAULT_TIME_FIELD_MARKER) -> bool:
    """Return True if a metadata key should be handled as a timestamp."""
    return marker in str(name)


def _parse_offset(text: str) -> timezone:
    if text == "Z":
        return timezone.utc
    sign = -1 if text[0] == "-" else 1
    parts = [int(p) for p in text[1:].split(":")]
    hours, minutes = parts[0], parts[1]
    seconds = parts[2] if len(parts) > 2 else 0
    if hours > 18 or minutes > 59 or seconds > 59:
        raise ValueError(f"offset out of range: {text}")
    return timezone(sign * timedelta(hours=hours, minutes=minutes, seconds=seconds))


def parse_offset_datetime(value: Any, field: Optional[str] = None) -> datetime:
    """
    Parse an ISO-8601 date-time that carries an explicit UTC offset.

    Args:
        value: Raw metadata value
        field: Metadata key, used in the error location

    Returns:
        datetime: Timezone-aware datetime

    Raises:
        TimestampParseError: If value is not a string in the accepted format,
            has no offset, or names an impossible date/time
    """
    if not isinstance(value, str):
        raise TimestampParseError(value, field)

    match = _OFFSET_DATETIME.fullmatch(value)
    if match is None:
        raise TimestampParseError(value, field)

    fraction = match.group("fraction") or ""
    # datetime only holds microseconds; extra digits are truncated
    microsecond = int(fraction[:6].ljust(6, "0")) if fraction else 0

    try:
        return datetime(
            int(match.group("year")),
            int(match.group("month")),
            int(match.group("day")),
            int(match.group("hour")),
            int(match.group("minute")),
            int(match.group("second") or 0),
            microsecond,
            tzinfo=_parse_offset(match.group("offset")),
        )
    except ValueError as e:
        raise TimestampParseError(value, field) from e


def _offset_designator(offset: timedelta) -> str:
    total_minutes = int(offset.total_seconds()) // 60
    if total_minutes == 0:
        return "Z"
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)
    if minutes:
        return f"{sign}{hours:02d}{minutes:02d}"
    return f"{sign}{hours:02d}"


def format_in_offset(value: datetime, target: timezone) -> str:
    """Render an aware datetime in target as yyyy-MM-dd'T'HH:mm:ssX."""
    local = value.astimezone(target)
    return (
        f"{local.year:04d}-{local.month:02d}-{local.day:02d}"
        f"T{local.hour:02d}:{local.minute:02d}:{local.second:02d}"
        + _offset_designator(local.utcoffset())
    )


def normalize_timestamp(value: Any, target: timezone, field: Optional[str] = None) -> Optional[str]:
    """
    Parse and re-render a time-like value; None passes through unchanged.

    Raises:
        TimestampParseError: If value is present but unparseable
    """
    if value is None:
        return None
    parsed = parse_offset_datetime(value, field)
    try:
        return format_in_offset(parsed, target)
    except OverflowError as e:
        raise TimestampParseError(value, field) from e
