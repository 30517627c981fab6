"""Change notices delivered to event log subscribers."""

from dataclasses import dataclass
from enum import Enum

from .event import Event


class ChangeKind(str, Enum):
    """What happened to the log."""

    APPENDED = "appended"
    UPDATED = "updated"
    CLEARED = "cleared"
    TOUCHED = "touched"  # re-render request, contents unchanged


@dataclass(frozen=True)
class ChangeNotice:
    """A single log change. ``event`` is None for CLEARED and TOUCHED."""

    kind: ChangeKind
    event: Event | None = None
