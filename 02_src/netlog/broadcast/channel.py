"""Broadcast channel: fan-out of change notices to subscribers."""

import itertools
import threading
from collections import deque
from typing import Callable, Protocol

from ..logging_config import get_logger
from ..models import ChangeNotice

logger = get_logger(__name__)


NoticeHandler = Callable[[ChangeNotice], None]
FaultHandler = Callable[[Exception, "Subscription"], None]


class Subscription:
    """A cancellable registration with a BroadcastChannel."""

    def __init__(self, channel: "BroadcastChannel", subscription_id: int):
        self._channel = channel
        self._id = subscription_id
        self._active = True

    @property
    def id(self) -> int:
        return self._id

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        """Stop further deliveries. Cancelling twice is a no-op."""
        if not self._active:
            return
        self._active = False
        self._channel._remove(self._id)

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *exc_info) -> None:
        self.cancel()

    def __repr__(self) -> str:
        state = "active" if self._active else "cancelled"
        return f"<Subscription {self._id} {state}>"


class IBroadcastChannel(Protocol):
    """Delivers each notice to every active subscriber."""

    def subscribe(self, handler: NoticeHandler) -> Subscription:
        """Register a handler; returns its Subscription."""
        ...

    def emit(self, notice: ChangeNotice) -> None:
        """Deliver a notice to all active subscribers."""
        ...


class BroadcastChannel:
    """In-memory synchronous pub/sub for ChangeNotices."""

    def __init__(self, on_fault: FaultHandler | None = None):
        self._on_fault = on_fault
        self._subscribers: dict[int, NoticeHandler] = {}
        self._subscriptions: dict[int, Subscription] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()
        # Notices emitted by a handler wait until the current one is delivered
        self._pending: deque[ChangeNotice] = deque()
        self._delivering = False

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def subscribe(self, handler: NoticeHandler) -> Subscription:
        """Register a handler; returns its Subscription."""
        with self._lock:
            subscription = Subscription(self, next(self._ids))
            self._subscribers[subscription.id] = handler
            self._subscriptions[subscription.id] = subscription
        logger.debug("Subscriber %s registered", subscription.id)
        return subscription

    def emit(self, notice: ChangeNotice) -> None:
        """Deliver a notice to all active subscribers.

        A notice emitted from inside a handler is queued and delivered once
        every subscriber has seen the current one, so each subscriber
        receives notices in emission order.
        """
        with self._lock:
            self._pending.append(notice)
            if self._delivering:
                return
            self._delivering = True

        try:
            while True:
                with self._lock:
                    if not self._pending:
                        self._delivering = False
                        return
                    current = self._pending.popleft()
                self._deliver(current)
        except BaseException:
            with self._lock:
                self._pending.clear()
                self._delivering = False
            raise

    def _deliver(self, notice: ChangeNotice) -> None:
        with self._lock:
            targets = list(self._subscribers.items())

        for subscription_id, handler in targets:
            # Cancelled by an earlier handler during this emission
            if subscription_id not in self._subscribers:
                continue
            try:
                handler(notice)
            except Exception as e:
                logger.exception(
                    "Error in subscriber %s",
                    subscription_id,
                    extra={"context": {"notice": notice.kind.value}},
                )
                subscription = self._subscriptions.get(subscription_id)
                if self._on_fault is not None and subscription is not None:
                    self._report_fault(e, subscription)

    def _report_fault(self, error: Exception, subscription: Subscription) -> None:
        try:
            self._on_fault(error, subscription)
        except Exception:
            logger.exception("Error in fault handler for subscriber %s", subscription.id)

    def _remove(self, subscription_id: int) -> None:
        with self._lock:
            self._subscribers.pop(subscription_id, None)
            self._subscriptions.pop(subscription_id, None)
        logger.debug("Subscriber %s cancelled", subscription_id)
