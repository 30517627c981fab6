"""Traffic event data model."""

import dataclasses
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from ..errors import AlreadyTerminal
from .traffic import Request, Response


class EventStatus(str, Enum):
    """Outcome state of an Event."""

    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


def _new_event_id() -> str:
    return uuid.uuid4().hex


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Event:
    """One recorded traffic exchange.

    Events are values: the single pending -> terminal transition produces a
    new Event with the same ``id`` and ``timestamp`` which is then stored
    with ``EventLog.update``.
    """

    request: Request | None = None
    response: Response | None = None
    error: Any = None
    id: str = field(default_factory=_new_event_id)
    timestamp: datetime = field(default_factory=_utcnow)

    def __post_init__(self):
        if self.response is not None and self.error is not None:
            raise ValueError("Event cannot have both a response and an error")

    @property
    def status(self) -> EventStatus:
        if self.error is not None:
            return EventStatus.FAILED
        if self.response is not None:
            return EventStatus.COMPLETED
        return EventStatus.PENDING

    @property
    def is_terminal(self) -> bool:
        return self.status is not EventStatus.PENDING

    def with_response(self, response: Response) -> "Event":
        """Return the terminal copy of this event carrying ``response``."""
        if self.is_terminal:
            raise AlreadyTerminal(self.id)
        return dataclasses.replace(self, response=response)

    def with_error(self, error: Any) -> "Event":
        """Return the terminal copy of this event carrying ``error``."""
        if self.is_terminal:
            raise AlreadyTerminal(self.id)
        if error is None:
            raise ValueError("error must not be None")
        return dataclasses.replace(self, error=error)
