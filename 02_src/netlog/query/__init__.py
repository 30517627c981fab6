"""Query module."""

from .filter import count_matches, filter_events

__all__ = ["count_matches", "filter_events"]
