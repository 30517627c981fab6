"""Broadcast module."""

from .channel import (
    BroadcastChannel,
    FaultHandler,
    IBroadcastChannel,
    NoticeHandler,
    Subscription,
)

__all__ = [
    "BroadcastChannel",
    "FaultHandler",
    "IBroadcastChannel",
    "NoticeHandler",
    "Subscription",
]
