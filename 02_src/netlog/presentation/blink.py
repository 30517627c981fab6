"""Unseen-activity indicator."""

from enum import Enum

from ..config import DEFAULT_BLINK_HIGH


class ActivityIcon(str, Enum):
    """Icon shown by the activity indicator."""

    IDLE = "idle"
    ACTIVE = "active"


class BlinkIndicator:
    """Alternating-parity countdown that makes an icon blink on new traffic.

    Each notification re-arms the counter, decay ticks count it down to
    zero, and the icon follows the counter's parity.
    """

    def __init__(self, high: int = DEFAULT_BLINK_HIGH):
        if high < 1:
            raise ValueError(f"high must be at least 1, got {high}")
        self._high = high
        self._value = 0

    @property
    def value(self) -> int:
        return self._value

    @property
    def icon(self) -> ActivityIcon:
        return ActivityIcon.IDLE if self._value % 2 == 0 else ActivityIcon.ACTIVE

    def on_notification(self) -> None:
        """Re-arm the counter for one log notification."""
        self._value = self._high if self._value % 2 == 0 else self._high - 1

    def decay(self) -> None:
        """One decay tick, floored at zero."""
        if self._value > 0:
            self._value -= 1
