"""Server-sent event bridge from the EventLog to async consumers."""

import asyncio
import json

from ..broadcast import Subscription
from ..event_log import IEventLog
from ..logging_config import get_logger
from ..models import ChangeNotice
from .schemas import notice_to_dict

logger = get_logger(__name__)

CONNECTED_FRAME = "event: connected\ndata: {}\n\n"
KEEPALIVE_FRAME = ": keepalive\n\n"


def format_sse(notice: ChangeNotice) -> str:
    """Render a notice as one SSE frame."""
    data = json.dumps(notice_to_dict(notice), default=str)
    return f"event: {notice.kind.value}\ndata: {data}\n\n"


class NoticeStream:
    """Subscribes to a log and queues its notices for an async reader.

    Notices may be emitted from any thread; they are handed to the
    reader's loop with ``call_soon_threadsafe``.
    """

    def __init__(self, event_log: IEventLog, keepalive: float = 15.0):
        self._log = event_log
        self._keepalive = keepalive
        self._queue: asyncio.Queue[ChangeNotice] = asyncio.Queue()
        self._loop: asyncio.AbstractEventLoop | None = None
        self._subscription: Subscription | None = None

    async def __aenter__(self) -> "NoticeStream":
        self._loop = asyncio.get_running_loop()
        self._subscription = self._log.subscribe(self._enqueue)
        logger.info("SSE client connected")
        return self

    async def __aexit__(self, *exc_info) -> None:
        if self._subscription is not None:
            self._subscription.cancel()
            self._subscription = None
        logger.info("SSE client disconnected")

    def _enqueue(self, notice: ChangeNotice) -> None:
        self._loop.call_soon_threadsafe(self._queue.put_nowait, notice)

    async def next_frame(self) -> str:
        """Next notice as an SSE frame, or a keepalive comment when idle."""
        try:
            notice = await asyncio.wait_for(self._queue.get(), timeout=self._keepalive)
        except asyncio.TimeoutError:
            return KEEPALIVE_FRAME
        return format_sse(notice)
