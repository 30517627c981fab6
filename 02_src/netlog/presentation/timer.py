"""Cancellable periodic timer for viewer ticks."""

import asyncio
from typing import Callable

from ..logging_config import get_logger

logger = get_logger(__name__)


class PeriodicTimer:
    """Calls ``callback`` every ``interval`` seconds on the running loop."""

    def __init__(self, interval: float, callback: Callable[[], None], name: str = "timer"):
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self._interval = interval
        self._callback = callback
        self._name = name
        self._task: asyncio.Task | None = None

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        """Start ticking. No-op if already running."""
        if self.running:
            return
        self._task = asyncio.create_task(self._run(), name=self._name)

    async def stop(self) -> None:
        """Stop ticking and wait for the task to finish."""
        task = self._task
        self._task = None
        if task is None:
            return

        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            try:
                self._callback()
            except Exception:
                logger.exception("Error in %s tick", self._name)

    async def __aenter__(self) -> "PeriodicTimer":
        await self.start()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.stop()
