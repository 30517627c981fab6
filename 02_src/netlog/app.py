"""Application bootstrap and lifecycle management."""

import os
from typing import Protocol

from .config import DEFAULT_BLINK_PERIOD, DEFAULT_ELAPSED_TICK, resolve_interval
from .event_log import EventLog, get_default_log
from .logging_config import get_logger
from .viewer import LogViewer

logger = get_logger(__name__)


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    async def start(self) -> None:
        """Initialize components in dependency order."""
        ...

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        ...

    async def reset(self) -> None:
        """Drop all logged traffic."""
        ...

    @property
    def event_log(self) -> EventLog:
        """The log this application serves."""
        ...

    @property
    def viewer(self) -> LogViewer:
        """The application's own viewer."""
        ...


class Application:
    """Main application bootstrap."""

    def __init__(self, event_log: EventLog | None = None):
        self._event_log = event_log
        self._blink_period = resolve_interval(os.getenv("BLINK_PERIOD"), DEFAULT_BLINK_PERIOD)
        self._elapsed_tick = resolve_interval(os.getenv("ELAPSED_TICK"), DEFAULT_ELAPSED_TICK)

        # Components (will be initialized in start())
        self._viewer: LogViewer | None = None

    async def start(self) -> None:
        """Initialize components in dependency order."""
        if self._viewer is not None:
            return
        logger.info("Starting application")

        # 1. EventLog (no dependencies)
        if self._event_log is None:
            self._event_log = get_default_log()

        # 2. LogViewer (depends on EventLog)
        self._viewer = LogViewer(
            self._event_log,
            blink_period=self._blink_period,
            elapsed_tick=self._elapsed_tick,
        )
        await self._viewer.start()
        logger.info("LogViewer started")

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        if self._viewer:
            await self._viewer.stop()
            self._viewer = None
        logger.info("Application stopped")

    async def reset(self) -> None:
        """Drop all logged traffic."""
        self.event_log.clear()
        logger.info("Reset complete")

    @property
    def event_log(self) -> EventLog:
        """Get event log instance."""
        if self._event_log is None:
            raise RuntimeError("Application not started")
        return self._event_log

    @property
    def viewer(self) -> LogViewer:
        """Get viewer instance."""
        if self._viewer is None:
            raise RuntimeError("Application not started")
        return self._viewer
