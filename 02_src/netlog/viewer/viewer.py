"""LogViewer: per-viewer live state over an EventLog."""

import asyncio
import threading
from datetime import datetime, timezone
from typing import Callable, Protocol

from ..broadcast import NoticeHandler, Subscription
from ..config import DEFAULT_BLINK_HIGH, DEFAULT_BLINK_PERIOD, DEFAULT_ELAPSED_TICK
from ..event_log import IEventLog
from ..logging_config import get_logger
from ..models import ChangeNotice, Event
from ..presentation import BlinkIndicator, PeriodicTimer, format_elapsed
from ..query import filter_events
from .snapshot import EventRow, ViewerSnapshot

logger = get_logger(__name__)


Clock = Callable[[], datetime]
RenderHandler = Callable[[ViewerSnapshot], None]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ILogViewer(Protocol):
    """A live, filterable view of an EventLog."""

    async def start(self) -> None:
        """Subscribe to the log and start the viewer timers."""
        ...

    async def stop(self) -> None:
        """Stop timers and unsubscribe."""
        ...

    def set_query(self, query: str) -> None:
        """Change the search query."""
        ...

    @property
    def snapshot(self) -> ViewerSnapshot:
        """Latest rendered state."""
        ...


class LogViewer:
    """Filtered event list with an activity indicator and elapsed labels.

    All viewer state is touched on the event loop the viewer was started on.
    Notices raised by mutations on other threads are handed to that loop.
    """

    def __init__(
        self,
        event_log: IEventLog,
        blink_period: float = DEFAULT_BLINK_PERIOD,
        elapsed_tick: float = DEFAULT_ELAPSED_TICK,
        blink_high: int = DEFAULT_BLINK_HIGH,
        clock: Clock = _utcnow,
        on_render: RenderHandler | None = None,
    ):
        self._log = event_log
        self._clock = clock
        self._on_render = on_render
        self._query = ""
        self._indicator = BlinkIndicator(high=blink_high)
        self._blink_timer = PeriodicTimer(blink_period, self._on_blink_tick, name="blink-decay")
        self._elapsed_timer = PeriodicTimer(elapsed_tick, self._render, name="elapsed-tick")
        self._subscription: Subscription | None = None
        self._snapshot = ViewerSnapshot()
        self._loop: asyncio.AbstractEventLoop | None = None
        self._loop_thread: int | None = None

    @property
    def running(self) -> bool:
        return self._subscription is not None

    @property
    def query(self) -> str:
        return self._query

    @property
    def indicator(self) -> BlinkIndicator:
        return self._indicator

    @property
    def snapshot(self) -> ViewerSnapshot:
        return self._snapshot

    async def start(self) -> None:
        """Subscribe to the log and start the viewer timers."""
        if self.running:
            return
        logger.info("Starting LogViewer")
        self._loop = asyncio.get_running_loop()
        self._loop_thread = threading.get_ident()
        self._subscription = self._log.subscribe(self._on_notice)
        await self._blink_timer.start()
        await self._elapsed_timer.start()
        self._render()

    async def stop(self) -> None:
        """Stop timers and unsubscribe."""
        logger.info("Stopping LogViewer")
        await self._blink_timer.stop()
        await self._elapsed_timer.stop()
        if self._subscription is not None:
            self._subscription.cancel()
            self._subscription = None

    def set_query(self, query: str) -> None:
        """Change the search query and ask every subscriber to re-render."""
        self._query = query
        self._log.notify_changed()

    def events(self) -> list[Event]:
        """Current events matching the query."""
        return list(filter_events(self._log.current_events(), self._query))

    def _on_notice(self, notice: ChangeNotice) -> None:
        if self._loop is not None and threading.get_ident() != self._loop_thread:
            self._loop.call_soon_threadsafe(self._apply_notice)
            return
        self._apply_notice()

    def _apply_notice(self) -> None:
        if not self.running:
            return
        self._indicator.on_notification()
        self._render()

    def _on_blink_tick(self) -> None:
        if self._indicator.value > 0:
            self._indicator.decay()
            self._render()

    def _render(self) -> None:
        all_events = self._log.current_events()
        matched = filter_events(all_events, self._query)
        now = self._clock()
        rows = [
            EventRow(
                id=event.id,
                method=event.request.method if event.request else "",
                uri=event.request.uri if event.request else "",
                status=event.status,
                elapsed=format_elapsed(event.timestamp, now),
            )
            for event in matched
        ]
        self._snapshot = ViewerSnapshot(
            query=self._query,
            rows=rows,
            result_count=len(rows),
            total_count=len(all_events),
            activity=self._indicator.icon,
        )
        if self._on_render is not None:
            self._on_render(self._snapshot)


def watch_event(event_log: IEventLog, event_id: str, handler: NoticeHandler) -> Subscription:
    """Subscribe to notices about a single event only."""

    def _forward(notice: ChangeNotice) -> None:
        if notice.event is not None and notice.event.id == event_id:
            handler(notice)

    return event_log.subscribe(_forward)
