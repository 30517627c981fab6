"""Render-ready viewer state."""

from dataclasses import dataclass, field

from ..models import EventStatus
from ..presentation import ActivityIcon


@dataclass(frozen=True)
class EventRow:
    """One line of the event list."""

    id: str
    method: str
    uri: str
    status: EventStatus
    elapsed: str


@dataclass(frozen=True)
class ViewerSnapshot:
    """Everything a viewer needs to draw its current state."""

    query: str = ""
    rows: list[EventRow] = field(default_factory=list)
    result_count: int = 0
    total_count: int = 0
    activity: ActivityIcon = ActivityIcon.IDLE
