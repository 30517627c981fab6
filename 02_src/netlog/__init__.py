"""Network Logger core module."""

from .app import Application, IApplication
from .broadcast import BroadcastChannel, IBroadcastChannel, Subscription
from .errors import AlreadyTerminal, DuplicateIdentity, EventLogError, NotFound
from .event_log import EventLog, IEventLog, get_default_log
from .models import (
    ChangeKind,
    ChangeNotice,
    Event,
    EventStatus,
    Request,
    Response,
)
from .presentation import ActivityIcon, BlinkIndicator, PeriodicTimer, format_elapsed
from .query import count_matches, filter_events
from .viewer import EventRow, ILogViewer, LogViewer, ViewerSnapshot, watch_event

__all__ = [
    # Application
    "Application",
    "IApplication",
    # Models
    "Request",
    "Response",
    "Event",
    "EventStatus",
    "ChangeKind",
    "ChangeNotice",
    # Errors
    "EventLogError",
    "DuplicateIdentity",
    "NotFound",
    "AlreadyTerminal",
    # Components
    "IBroadcastChannel",
    "BroadcastChannel",
    "Subscription",
    "IEventLog",
    "EventLog",
    "get_default_log",
    "filter_events",
    "count_matches",
    "ActivityIcon",
    "BlinkIndicator",
    "PeriodicTimer",
    "format_elapsed",
    "ILogViewer",
    "LogViewer",
    "EventRow",
    "ViewerSnapshot",
    "watch_event",
]
