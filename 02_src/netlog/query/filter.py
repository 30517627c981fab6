"""Filtered views over event sequences."""

from typing import Sequence

from ..models import Event


def filter_events(events: Sequence[Event], query: str) -> Sequence[Event]:
    """Events whose request URI contains ``query``, case-insensitively.

    An empty query returns ``events`` itself. Events without a request
    never match.
    """
    if not query:
        return events

    needle = query.lower()
    return [
        event
        for event in events
        if event.request is not None and needle in event.request.uri.lower()
    ]


def count_matches(events: Sequence[Event], query: str) -> int:
    """Number of events ``filter_events`` would return."""
    return len(filter_events(events, query))
