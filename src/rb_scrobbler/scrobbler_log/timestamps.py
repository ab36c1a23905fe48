"""Time-zone offset parsing and timestamp correction to UTC."""

import re
from datetime import timedelta
from fractions import Fraction

from rb_scrobbler.scrobbler_log.exceptions import TimestampConversionError

_ONE_SECOND = timedelta(seconds=1)

# Nanoseconds per duration unit
_UNIT_NANOSECONDS: dict[str, int] = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # U+00B5 micro sign
    "μs": 1_000,  # U+03BC greek small letter mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

_COMPONENT = r"([0-9]+(?:\.[0-9]*)?|\.[0-9]+)(ns|us|µs|μs|ms|s|m|h)"
_DURATION_PATTERN = re.compile(rf"([+-]?)((?:{_COMPONENT})+)")
_COMPONENT_PATTERN = re.compile(_COMPONENT)
_TIMESTAMP_PATTERN = re.compile(r"[0-9]+")

# Largest duration Go's time.ParseDuration accepts
_MAX_DURATION_NS = 2**63 - 1


def parse_offset(text: str) -> timedelta:
    """Parse a signed duration such as '0h', '-5h30m' or '+1.5h'.

    Accepts the same syntax as Go's time.ParseDuration: an optional sign
    followed by one or more decimal-number/unit pairs. A bare '0' is also
    accepted. Sub-microsecond precision is truncated.
    """
    if text in ("0", "+0", "-0"):
        return timedelta(0)

    match = _DURATION_PATTERN.fullmatch(text)
    if match is None:
        raise TimestampConversionError(f"Invalid time offset: {text!r}")

    sign, body = match.group(1), match.group(2)
    total_ns = 0
    for number, unit in _COMPONENT_PATTERN.findall(body):
        total_ns += int(Fraction(number) * _UNIT_NANOSECONDS[unit])

    if total_ns > _MAX_DURATION_NS:
        raise TimestampConversionError(f"Time offset out of range: {text!r}")

    offset = timedelta(microseconds=total_ns // 1_000)
    return -offset if sign == "-" else offset


def parse_timestamp(timestamp: str | int) -> int:
    """Interpret a log timestamp field as integer epoch seconds."""
    if isinstance(timestamp, int):
        return timestamp
    if not _TIMESTAMP_PATTERN.fullmatch(timestamp):
        raise TimestampConversionError(f"Invalid timestamp: {timestamp!r}")
    return int(timestamp)


def correct_timestamp(timestamp: str | int, offset: timedelta | str) -> int:
    """Shift a local epoch timestamp to UTC by subtracting ``offset``.

    Entries logged in a zone behind UTC (negative offset) move forward,
    entries ahead of UTC move back. The result is floored to whole seconds.
    """
    if isinstance(offset, str):
        offset = parse_offset(offset)
    seconds = parse_timestamp(timestamp)
    try:
        return (timedelta(seconds=seconds) - offset) // _ONE_SECOND
    except OverflowError as exc:
        raise TimestampConversionError(f"Timestamp out of range: {timestamp!r}") from exc
