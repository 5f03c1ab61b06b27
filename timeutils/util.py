"""Utility constants and helpers for timeutils.

Time unit constants are `timedelta` values so they combine directly with the
`datetime` endpoints of an interval.
"""

from datetime import datetime, timedelta, timezone

# Time unit constants
SECOND = timedelta(seconds=1)
MINUTE = timedelta(minutes=1)
HOUR = timedelta(hours=1)
DAY = timedelta(days=1)
WEEK = timedelta(weeks=1)


def format_rfc3339(instant: datetime) -> str:
    """Render an instant as RFC 3339 to whole seconds, using ``Z`` for UTC.

    Naive instants are rendered without an offset.
    """
    text = instant.replace(microsecond=0).isoformat()
    if instant.utcoffset() == timedelta(0):
        return text.removesuffix("+00:00") + "Z"
    return text


def to_instant(moment: datetime) -> datetime:
    """Return a value that orders chronologically against other instants.

    Aware datetimes sharing a tzinfo compare by wall clock and ignore
    ``fold``, so they are converted to UTC. Naive datetimes pass through.
    """
    if moment.utcoffset() is None:
        return moment
    return moment.astimezone(timezone.utc)
