"""Coarse elapsed-time labels."""

from datetime import datetime, timedelta, timezone


def format_elapsed(timestamp: datetime, now: datetime | None = None) -> str:
    """Label the time since ``timestamp`` as seconds, minutes or hours.

    Under 90 seconds renders seconds, under 90 minutes renders minutes,
    anything longer renders hours. Values are truncated.
    """
    if now is None:
        now = datetime.now(timezone.utc)

    delta = now - timestamp
    seconds = int(delta / timedelta(seconds=1))
    if seconds < 90:
        return f"{seconds} s"

    minutes = int(delta / timedelta(minutes=1))
    if minutes < 90:
        return f"{minutes} m"

    return f"{int(delta / timedelta(hours=1))} h"
