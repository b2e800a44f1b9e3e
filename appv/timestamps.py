"""
Build timestamp parsing and formatting

Build scripts stamp the build time with the default output of the Unix
`date` command:

    Thu Feb 14 15:04:05 SAST 2019

Records expose the parsed instant as RFC 3339 text:

    2019-02-14T15:04:05Z

Zone abbreviations are not globally unique, so an abbreviation other than
UTC/GMT is kept as the zone name with a zero offset. Numeric forms
(GMT+2, +0200) carry their real offset.

Author: appv maintainers | 2026-10-17
"""

import re
from datetime import datetime, timedelta, timezone
from typing import Optional

from .errors import InvalidTimestampError

WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
          "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# Mon Jan _2 15:04:05 MST 2006
UNIX_DATE_PATTERN = re.compile(
    r"(?P<weekday>[A-Za-z]{3}) +(?P<month>[A-Za-z]{3}) +(?P<day>\d{1,2}) +"
    r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2}) +"
    r"(?P<zone>\S+) +(?P<year>\d{4})"
)

_GMT_OFFSET = re.compile(r"(?:UTC|GMT)(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?")
_NUMERIC_OFFSET = re.compile(r"(?P<sign>[+-])(?P<hours>\d{2})(?::?(?P<minutes>\d{2}))?")
_ABBREVIATION = re.compile(r"[A-Z]{3,5}|ChST|MeST")

RFC3339_PATTERN = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})[Tt]"
    r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>[Zz]|[+-]\d{2}:\d{2})"
)


def _offset_zone(sign: str, hours: str, minutes: Optional[str], name: Optional[str] = None) -> timezone:
    if int(minutes or 0) >= 60:
        raise ValueError(f"offset minutes out of range: {sign}{hours}:{minutes}")
    delta = timedelta(hours=int(hours), minutes=int(minutes or 0))
    if delta >= timedelta(hours=24):
        raise ValueError(f"offset out of range: {sign}{hours}:{minutes or '00'}")
    if sign == "-":
        delta = -delta
    if name:
        return timezone(delta, name)
    return timezone(delta)


def parse_zone(text: str) -> timezone:
    """
    Resolve the zone field of a Unix `date` timestamp.

    Raises:
        ValueError: If the field is not a zone abbreviation or offset
    """
    if text in ("UTC", "GMT"):
        return timezone.utc

    match = _GMT_OFFSET.fullmatch(text)
    if match:
        return _offset_zone(match["sign"], match["hours"], match["minutes"], name=text)

    match = _NUMERIC_OFFSET.fullmatch(text)
    if match:
        return _offset_zone(match["sign"], match["hours"], match["minutes"])

    if _ABBREVIATION.fullmatch(text):
        return timezone(timedelta(0), text)

    raise ValueError(f"unknown time zone {text!r}")


def parse_unix_date(text: str) -> datetime:
    """
    Parse a timestamp in the Unix `date` default layout.

    Args:
        text: e.g. "Thu Feb 14 15:04:05 SAST 2019"

    Returns:
        Timezone-aware datetime

    Raises:
        InvalidTimestampError: If the text does not match the layout
    """
    if not isinstance(text, str):
        raise InvalidTimestampError(text, "timestamp must be a string")

    match = UNIX_DATE_PATTERN.fullmatch(text)
    if match is None:
        raise InvalidTimestampError(
            text, "timestamp does not match layout 'Mon Jan _2 15:04:05 MST 2006'"
        )

    weekday = match["weekday"].title()
    month = match["month"].title()
    if weekday not in WEEKDAYS:
        raise InvalidTimestampError(text, f"unknown weekday {match['weekday']!r}")
    if month not in MONTHS:
        raise InvalidTimestampError(text, f"unknown month {match['month']!r}")

    try:
        tzinfo = parse_zone(match["zone"])
        return datetime(
            int(match["year"]),
            MONTHS.index(month) + 1,
            int(match["day"]),
            int(match["hour"]),
            int(match["minute"]),
            int(match["second"]),
            tzinfo=tzinfo,
        )
    except ValueError as e:
        raise InvalidTimestampError(text, str(e)) from e


def format_rfc3339(dt: datetime) -> str:
    """
    Format a datetime as RFC 3339 text.

    Naive datetimes are taken to be UTC. A zero offset is written as "Z";
    fractional seconds are written only when present.
    """
    offset = dt.utcoffset()
    if offset is None:
        offset = timedelta(0)

    text = (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
        f"T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
    )
    if dt.microsecond:
        text += f".{dt.microsecond:06d}"

    if not offset:
        return text + "Z"

    sign = "+" if offset > timedelta(0) else "-"
    minutes = abs(int(offset.total_seconds())) // 60
    return text + f"{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def parse_rfc3339(text: str) -> datetime:
    """
    Parse RFC 3339 text as produced by format_rfc3339().

    Raises:
        InvalidTimestampError: If the text is not RFC 3339
    """
    if not isinstance(text, str):
        raise InvalidTimestampError(text, "timestamp must be a string")

    match = RFC3339_PATTERN.fullmatch(text)
    if match is None:
        raise InvalidTimestampError(text, "timestamp is not RFC 3339")

    offset = match["offset"]
    fraction = (match["fraction"] or "")[:6].ljust(6, "0")

    try:
        if offset in ("Z", "z"):
            tzinfo = timezone.utc
        else:
            tzinfo = _offset_zone(offset[0], offset[1:3], offset[4:6])
        return datetime(
            int(match["year"]),
            int(match["month"]),
            int(match["day"]),
            int(match["hour"]),
            int(match["minute"]),
            int(match["second"]),
            int(fraction),
            tzinfo=tzinfo,
        )
    except ValueError as e:
        raise InvalidTimestampError(text, str(e)) from e
