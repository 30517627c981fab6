"""Viewer module."""

from .snapshot import EventRow, ViewerSnapshot
from .viewer import ILogViewer, LogViewer, watch_event

__all__ = ["EventRow", "ILogViewer", "LogViewer", "ViewerSnapshot", "watch_event"]
