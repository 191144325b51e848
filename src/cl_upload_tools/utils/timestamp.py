import time
from datetime import datetime, timezone


def to_microseconds(moment: datetime) -> int:
    """
    Converts a datetime to microseconds since the Unix epoch.
    Naive datetimes are assumed to be in the system's local timezone.
    """
    if moment.tzinfo is None or moment.tzinfo.utcoffset(moment) is None:
        moment = moment.astimezone()

    delta = moment.astimezone(timezone.utc) - datetime(1970, 1, 1, tzinfo=timezone.utc)
    return (delta.days * 86_400 + delta.seconds) * 1_000_000 + delta.microseconds


def microtime_digits(moment: datetime | None = None) -> str:
    """
    Current (or given) time in microseconds as a digits-only string.

    Used as a filename suffix to break name collisions.
    """
    if moment is None:
        return str(time.time_ns() // 1000)
    return str(to_microseconds(moment))
