"""EventLog implementation: ordered store of traffic events."""

import threading
from typing import Protocol

from ..broadcast import BroadcastChannel, FaultHandler, NoticeHandler, Subscription
from ..errors import AlreadyTerminal, DuplicateIdentity, NotFound
from ..logging_config import get_logger
from ..models import ChangeKind, ChangeNotice, Event

logger = get_logger(__name__)


class IEventLog(Protocol):
    """Ordered, mutable store of Events with notification on mutation."""

    def append(self, event: Event) -> None:
        """Add a new Event at the end. Raises DuplicateIdentity."""
        ...

    def update(self, event: Event) -> None:
        """Replace the stored Event with the same id.

        Raises NotFound, or AlreadyTerminal if a terminal Event would change.
        """
        ...

    def clear(self) -> None:
        """Remove all Events."""
        ...

    def notify_changed(self) -> None:
        """Ask subscribers to re-derive their views; contents unchanged."""
        ...

    def current_events(self) -> list[Event]:
        """Snapshot of all Events in insertion order."""
        ...

    def subscribe(self, handler: NoticeHandler) -> Subscription:
        """Register a handler for change notices."""
        ...


class EventLog:
    """In-memory event log.

    Mutations are serialized behind one re-entrant lock and the change
    notice is delivered before the lock is released. Handlers may read or
    mutate the log from inside their callback; notices they cause are
    delivered after the current one, so every subscriber sees them in order.
    """

    def __init__(self, on_fault: FaultHandler | None = None):
        self._events: list[Event] = []
        self._index: dict[str, int] = {}  # event id -> position
        self._lock = threading.RLock()
        self._channel = BroadcastChannel(on_fault=on_fault)

    def __len__(self) -> int:
        return len(self._events)

    @property
    def channel(self) -> BroadcastChannel:
        return self._channel

    def append(self, event: Event) -> None:
        """Add a new Event at the end. Raises DuplicateIdentity."""
        with self._lock:
            if event.id in self._index:
                raise DuplicateIdentity(event.id)
            self._index[event.id] = len(self._events)
            self._events.append(event)
            logger.debug(
                "Event appended",
                extra={"context": {"event_id": event.id, "size": len(self._events)}},
            )
            self._channel.emit(ChangeNotice(ChangeKind.APPENDED, event))

    def update(self, event: Event) -> None:
        """Replace the stored Event with the same id.

        A terminal Event can only be re-stored unchanged. Raises NotFound,
        or AlreadyTerminal if a terminal Event would change.
        """
        with self._lock:
            position = self._index.get(event.id)
            if position is None:
                raise NotFound(event.id)
            stored = self._events[position]
            if stored.is_terminal and event != stored:
                raise AlreadyTerminal(event.id)
            self._events[position] = event
            logger.debug(
                "Event updated",
                extra={"context": {"event_id": event.id, "status": event.status.value}},
            )
            self._channel.emit(ChangeNotice(ChangeKind.UPDATED, event))

    def clear(self) -> None:
        """Remove all Events."""
        with self._lock:
            removed = len(self._events)
            self._events.clear()
            self._index.clear()
            logger.info("Event log cleared", extra={"context": {"removed": removed}})
            self._channel.emit(ChangeNotice(ChangeKind.CLEARED))

    def notify_changed(self) -> None:
        """Ask subscribers to re-derive their views; contents unchanged."""
        with self._lock:
            self._channel.emit(ChangeNotice(ChangeKind.TOUCHED))

    def get(self, event_id: str) -> Event:
        """Get an Event by id. Raises NotFound."""
        with self._lock:
            position = self._index.get(event_id)
            if position is None:
                raise NotFound(event_id)
            return self._events[position]

    def current_events(self) -> list[Event]:
        """Snapshot of all Events in insertion order."""
        with self._lock:
            return list(self._events)

    def subscribe(self, handler: NoticeHandler) -> Subscription:
        """Register a handler for change notices emitted after this call."""
        return self._channel.subscribe(handler)


# Process-wide default log
_default_log: EventLog | None = None
_default_lock = threading.Lock()


def get_default_log() -> EventLog:
    """Get or create the process-wide EventLog."""
    global _default_log
    with _default_lock:
        if _default_log is None:
            _default_log = EventLog()
            logger.info("Default event log created")
        return _default_log
