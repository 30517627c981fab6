"""EventLog module."""

from .event_log import EventLog, IEventLog, get_default_log

__all__ = ["EventLog", "IEventLog", "get_default_log"]
