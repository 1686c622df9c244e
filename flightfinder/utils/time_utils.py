"""
Timezone conversions between local wall-clock strings and absolute instants.

All ordering and duration arithmetic happens on aware UTC datetimes; local
strings are only a presentation format. This keeps flights that cross the
date line monotonic even when their local timestamps are not.
"""
import re
from datetime import date, datetime, tzinfo

import pytz

from flightfinder.exceptions import InvalidDate, InvalidTimestamp, InvalidTimezone

_DATE_PATTERN = re.compile(r'[0-9]{4}-[0-9]{2}-[0-9]{2}')


def get_timezone(timezone_id: str) -> tzinfo:
    """
    Resolve an IANA timezone identifier

    Args:
        timezone_id: Timezone string (Olson format, e.g., 'America/New_York')

    Returns:
        pytz timezone

    Raises:
        InvalidTimezone: If the identifier is unknown
    """
    try:
        return pytz.timezone(timezone_id)
    except (pytz.UnknownTimeZoneError, AttributeError):
        raise InvalidTimezone(str(timezone_id)) from None


def parse_local_timestamp(local_timestamp: str) -> datetime:
    """Parse a naive ISO-8601 local date-time"""
    if not isinstance(local_timestamp, str):
        raise InvalidTimestamp(repr(local_timestamp))
    try:
        parsed = datetime.fromisoformat(local_timestamp)
    except ValueError:
        raise InvalidTimestamp(local_timestamp) from None
    if parsed.tzinfo is not None:
        raise InvalidTimestamp(local_timestamp, "local timestamps must not carry a UTC offset")
    return parsed


def to_absolute_instant(local_timestamp: str, timezone_id: str) -> datetime:
    """
    Interpret a wall-clock timestamp in the given zone and return it in UTC

    The zone's offset at that date is applied, including daylight saving.
    Ambiguous wall-clock times (clocks going back) resolve to standard time.

    Args:
        local_timestamp: ISO-8601 string without offset (e.g. '2024-03-15T08:30:00')
        timezone_id: IANA timezone of the airport

    Returns:
        Timezone-aware UTC datetime

    Raises:
        InvalidTimezone: If the zone is unknown
        InvalidTimestamp: If the timestamp cannot be parsed
    """
    tz = get_timezone(timezone_id)
    naive = parse_local_timestamp(local_timestamp)
    localized = tz.normalize(tz.localize(naive, is_dst=False))
    return localized.astimezone(pytz.utc)


def to_local_timestamp(instant: datetime, timezone_id: str) -> str:
    """
    Format an instant as ISO-8601 in the given zone, with explicit offset

    Naive instants are taken to be UTC.
    """
    tz = get_timezone(timezone_id)
    if instant.tzinfo is None:
        instant = pytz.utc.localize(instant)
    return instant.astimezone(tz).isoformat()


def local_date(instant: datetime, timezone_id: str) -> date:
    """Calendar date of an instant in the given zone"""
    tz = get_timezone(timezone_id)
    if instant.tzinfo is None:
        instant = pytz.utc.localize(instant)
    return instant.astimezone(tz).date()


def minutes_between(a: datetime, b: datetime) -> int:
    """Signed whole minutes from a to b, truncated toward zero"""
    return int((b - a).total_seconds() / 60)


def parse_search_date(value: str) -> date:
    """
    Parse a YYYY-MM-DD search date

    Raises:
        InvalidDate: If the format is wrong or the date does not exist
    """
    if not isinstance(value, str) or not _DATE_PATTERN.fullmatch(value):
        raise InvalidDate(str(value))
    try:
        return datetime.strptime(value, '%Y-%m-%d').date()
    except ValueError:
        raise InvalidDate(value) from None


def format_duration(minutes: int) -> str:
    """Human-readable duration, e.g. 315 -> '5h 15m'"""
    hours, mins = divmod(minutes, 60)
    if hours == 0:
        return f"{mins}m"
    return f"{hours}h {mins}m" if mins else f"{hours}h"
