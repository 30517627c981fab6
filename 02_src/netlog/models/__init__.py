"""Core data models for Network Logger."""

from .traffic import Body, Request, Response
from .event import Event, EventStatus
from .notice import ChangeKind, ChangeNotice

__all__ = [
    # Traffic
    "Body",
    "Request",
    "Response",
    # Events
    "Event",
    "EventStatus",
    # Notices
    "ChangeKind",
    "ChangeNotice",
]
