"""Errors raised by the event log and its events."""


class EventLogError(Exception):
    """Base class for event log contract violations."""


class DuplicateIdentity(EventLogError):
    """An event with the same identity is already in the log."""

    def __init__(self, event_id: str):
        super().__init__(f"Event {event_id} is already logged")
        self.event_id = event_id


class NotFound(EventLogError):
    """No event with the given identity is in the log."""

    def __init__(self, event_id: str):
        super().__init__(f"Event {event_id} not found")
        self.event_id = event_id


class AlreadyTerminal(EventLogError):
    """The event already has a response or an error."""

    def __init__(self, event_id: str):
        super().__init__(f"Event {event_id} already has an outcome")
        self.event_id = event_id
