"""Live presentation state module."""

from .blink import ActivityIcon, BlinkIndicator
from .elapsed import format_elapsed
from .timer import PeriodicTimer

__all__ = ["ActivityIcon", "BlinkIndicator", "PeriodicTimer", "format_elapsed"]
