"""
Date helpers
Parses stored ISO-8601 strings and buckets them by calendar day in the configured zone.

Every value handed to the view engine is a naive datetime expressed in the
configured zone, so comparisons never mix aware and naive values.
"""

import re
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Optional, Tuple, Union
from zoneinfo import ZoneInfo

from .config import settings
from .errors import MalformedDateError

DateLike = Union[str, date, datetime]

_OFFSET_RE = re.compile(r"^([+-])(\d{2}):?(\d{2})$")


def resolve_zone(name: Optional[str] = None) -> Optional[tzinfo]:
    """
    Resolve a zone name into a tzinfo

    Args:
        name: IANA name, "UTC" or a fixed offset such as "+02:00";
            defaults to settings.timezone

    Returns:
        the tzinfo, or None for the process local zone
    """
    name = (settings.timezone if name is None else name).strip()
    if not name or name.lower() == "local":
        return None
    if name.upper() in ("UTC", "Z", "GMT"):
        return timezone.utc

    m = _OFFSET_RE.match(name)
    if m:
        sign_s, hh_s, mm_s = m.groups()
        minutes = int(hh_s) * 60 + int(mm_s)
        if sign_s == "-":
            minutes = -minutes
        return timezone(timedelta(minutes=minutes))

    try:
        return ZoneInfo(name)
    except Exception as e:
        raise ValueError(f"Invalid timezone identifier: {name!r}") from e


def now_local() -> datetime:
    """Current wall-clock time in the configured zone, naive"""
    zone = resolve_zone()
    if zone is None:
        return datetime.now()
    return datetime.now(zone).replace(tzinfo=None)


def today_local() -> date:
    return now_local().date()


def iso_timestamp() -> str:
    """UTC timestamp in the stored form, e.g. 2024-06-06T09:30:00.000Z"""
    stamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")


def parse_datetime(value: DateLike) -> datetime:
    """
    Parse a stored date or timestamp into a naive local datetime

    Date-only strings ("2024-06-10") are local midnight. Aware timestamps
    ("...Z", "+02:00") are converted into the configured zone first.

    Args:
        value: ISO-8601 string, date or datetime

    Returns:
        naive datetime in the configured zone

    Raises:
        MalformedDateError: value is empty or not ISO-8601
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith("Z") or text.endswith("z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise MalformedDateError(value) from None
    else:
        raise MalformedDateError(value)

    if parsed.tzinfo is None:
        return parsed

    zone = resolve_zone()
    if zone is None:
        return parsed.astimezone().replace(tzinfo=None)
    return parsed.astimezone(zone).replace(tzinfo=None)


def to_day(value: DateLike) -> date:
    """Calendar day of a stored value in the configured zone"""
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    return parse_datetime(value).date()


def day_key(value: DateLike) -> str:
    """YYYY-MM-DD key of the calendar day"""
    return to_day(value).isoformat()


def start_of_day(day: date) -> datetime:
    return datetime(day.year, day.month, day.day)


def week_bounds(day: date) -> Tuple[datetime, datetime]:
    """
    Sunday-to-Saturday calendar week containing the day

    Returns:
        (start of Sunday, last microsecond of Saturday)
    """
    # weekday(): Monday=0 ... Sunday=6
    offset = (day.weekday() + 1) % 7
    start = start_of_day(day - timedelta(days=offset))
    end = start + timedelta(days=7) - timedelta(microseconds=1)
    return start, end
