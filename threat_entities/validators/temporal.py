"""Calendar dates and RFC 3339 timestamps.

Both are round-tripped through their format: the canonical value is the
parsed value rendered again, not the input.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta, timezone

from ..errors import FormatError
from ..fingerprint import fingerprint

_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")

_DATETIME_RE = re.compile(
    r"([0-9]{4})-([0-9]{2})-([0-9]{2})T([0-9]{2}):([0-9]{2}):([0-9]{2})"
    r"(?:\.([0-9]+))?"
    r"(Z|[+-][0-9]{2}:[0-9]{2})"
)

# datetime only keeps microseconds; fractions are carried as text up to nanoseconds.
_MAX_FRACTION_DIGITS = 9

# Year 0000 parses (proleptic Gregorian, a leap year) but is below date.min.
# 2000 has the same calendar, so it stands in for the range checks.
_YEAR_ZERO_PROXY = 2000


def _calendar_year(year: int) -> int:
    return year or _YEAR_ZERO_PROXY


def validate_date(value: str) -> tuple[str, str]:
    m = _DATE_RE.fullmatch(value)
    if not m:
        raise FormatError(f"invalid date, expected YYYY-MM-DD: {value}")
    year, month, day = (int(g) for g in m.groups())
    try:
        d = date(_calendar_year(year), month, day)
    except ValueError as e:
        raise FormatError(f"invalid date: {value}: {e}") from None

    s = f"{year:04d}-{d.month:02d}-{d.day:02d}"
    return s, fingerprint(s)


def _parse_offset(text: str) -> timezone:
    if text == "Z":
        return timezone.utc
    hours, minutes = int(text[1:3]), int(text[4:6])
    if hours > 23 or minutes > 59:
        raise ValueError(f"offset out of range: {text}")
    delta = timedelta(hours=hours, minutes=minutes)
    return timezone(-delta if text[0] == "-" else delta)


def _format_offset(tz: timezone) -> str:
    delta = tz.utcoffset(None)
    if not delta:
        return "Z"
    sign = "-" if delta < timedelta(0) else "+"
    minutes = abs(int(delta.total_seconds())) // 60
    return f"{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def validate_datetime(value: str) -> tuple[str, str]:
    """Validate an RFC 3339 timestamp with optional fractional seconds.

    The fraction is kept up to nanosecond precision without trailing zeros and
    a zero UTC offset is written as `Z`, e.g. `2021-09-29T15:59:59.500+00:00`
    becomes `2021-09-29T15:59:59.5Z`.
    """
    m = _DATETIME_RE.fullmatch(value)
    if not m:
        raise FormatError(f"invalid datetime, expected RFC 3339: {value}")

    year, month, day, hour, minute, second, fraction, offset = m.groups()
    try:
        tz = _parse_offset(offset)
        dt = datetime(
            _calendar_year(int(year)),
            int(month),
            int(day),
            int(hour),
            int(minute),
            int(second),
            tzinfo=tz,
        )
    except ValueError as e:
        raise FormatError(f"invalid datetime: {value}: {e}") from None

    frac = (fraction or "")[:_MAX_FRACTION_DIGITS].rstrip("0")
    s = (
        f"{int(year):04d}-{dt.month:02d}-{dt.day:02d}"
        f"T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
    )
    if frac:
        s += "." + frac
    s += _format_offset(tz)
    return s, fingerprint(s)
