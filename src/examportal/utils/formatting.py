"""Display helpers for stored ISO-8601 timestamps.

Both helpers render in the timestamp's own offset (stored timestamps are UTC)
using fixed en-US wording, so output does not depend on the host locale.
"""

from datetime import datetime

MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, accepting a trailing ``Z`` for UTC.

    Raises:
        ValueError: If ``value`` is not an ISO-8601 timestamp.
    """
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def format_date(value: str) -> str:
    """Render a timestamp as a long date.

    Example:
        >>> format_date("2026-10-19T07:39:00.000Z")
        'October 19, 2026'
    """
    moment = parse_timestamp(value)
    return f"{MONTHS[moment.month - 1]} {moment.day}, {moment.year}"


def format_time(value: str) -> str:
    """Render a timestamp as a 12-hour clock time with a two-digit hour.

    Example:
        >>> format_time("2026-10-19T17:05:00.000Z")
        '05:05 PM'
    """
    moment = parse_timestamp(value)
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return f"{hour:02d}:{moment.minute:02d} {meridiem}"
