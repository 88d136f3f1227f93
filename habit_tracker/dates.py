import re
from datetime import date, datetime, timedelta

import pytz

from habit_tracker.errors import InvalidDayKeyError

# Day keys are computed in UTC unless the caller passes another zone.
DEFAULT_TZ = pytz.utc

DAY_KEY_FORMAT = "%Y-%m-%d"
_DAY_KEY_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def resolve_tz(tz=None):
    if tz is None:
        return DEFAULT_TZ
    if isinstance(tz, str):
        return pytz.timezone(tz)
    return tz


def now(tz=None) -> datetime:
    return datetime.now(resolve_tz(tz))


def day_key(moment=None, tz=None) -> str:
    """Return the YYYY-MM-DD key of ``moment`` in the reference timezone.

    ``moment`` may be a date (used as-is), an aware datetime (converted to
    ``tz``), a naive datetime (taken as UTC) or None for the current time.
    """
    if moment is None:
        return now(tz).strftime(DAY_KEY_FORMAT)
    if isinstance(moment, datetime):
        if moment.tzinfo is None:
            moment = pytz.utc.localize(moment)
        return moment.astimezone(resolve_tz(tz)).strftime(DAY_KEY_FORMAT)
    if isinstance(moment, date):
        return moment.isoformat()
    raise TypeError(f"Cannot build a day key from {type(moment).__name__}")


def today_key(tz=None) -> str:
    return day_key(None, tz)


def is_day_key(key) -> bool:
    if not isinstance(key, str) or not _DAY_KEY_RE.fullmatch(key):
        return False
    try:
        date.fromisoformat(key)
    except ValueError:
        return False
    return True


def parse_day_key(key: str) -> date:
    if not is_day_key(key):
        raise InvalidDayKeyError(f"Invalid day key: {key!r}")
    return date.fromisoformat(key)


def shift_day_key(key: str, days: int) -> str:
    return (parse_day_key(key) + timedelta(days=days)).isoformat()


def last_n_days(n: int, today=None, tz=None) -> list:
    """The ``n`` day keys ending with ``today``, oldest first."""
    if n < 1:
        raise ValueError("n must be at least 1")
    end = parse_day_key(today) if today else parse_day_key(today_key(tz))
    return [(end - timedelta(days=i)).isoformat() for i in range(n - 1, -1, -1)]
