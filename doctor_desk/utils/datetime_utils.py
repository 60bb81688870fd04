from datetime import date as date_type, datetime, time as time_type, timedelta
from typing import Tuple
import re

_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})(?::\d{2})?$")


def parse_calendar_date(value: str) -> date_type:
    """Parse ``YYYY-MM-DD`` or an ISO-8601 date-time, keeping only the date."""
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text).date()


def parse_time_of_day(value: str) -> Tuple[int, int]:
    """Parse a 24-hour ``HH:MM`` string into ``(hour, minute)``.

    A trailing ``:SS`` is accepted and ignored. Raises ``ValueError`` for
    anything else, including an hour above 23 or a minute above 59.
    """
    match = _TIME_PATTERN.match(value.strip())
    if not match:
        raise ValueError(f"Invalid time of day: {value!r}")

    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise ValueError(f"Time of day out of range: {value!r}")
    return hour, minute


def combine_date_time(date: str, time: str) -> datetime:
    """Combine a calendar date and an ``HH:MM`` time into one naive local
    timestamp with seconds and microseconds zeroed."""
    hour, minute = parse_time_of_day(time)
    return datetime.combine(parse_calendar_date(date), time_type(hour, minute))


def day_bounds(moment: datetime) -> Tuple[datetime, datetime]:
    """First and last representable instant of the day containing ``moment``."""
    start = datetime.combine(moment.date(), time_type.min)
    return start, start + timedelta(days=1) - timedelta(microseconds=1)
