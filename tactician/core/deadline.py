"""Absolute deadlines for time-bounded search.

A Deadline is an immutable point on the monotonic clock. It is passed by value
into every recursive call or iteration, and each check reads the clock
independently, so no timer state is shared between calls.
"""

from __future__ import annotations

import time
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Deadline:
    """Point in time (``time.monotonic()`` seconds) by which search must stop.

    Attributes:
        at: Monotonic timestamp of the deadline.
    """

    at: float

    @classmethod
    def after(cls, seconds: float) -> Deadline:
        """Deadline ``seconds`` from now."""
        return cls(time.monotonic() + seconds)

    @classmethod
    def never(cls) -> Deadline:
        """Deadline that never expires, for iteration-bounded search."""
        return cls(float("inf"))

    def exceeded(self) -> bool:
        """Whether the deadline has passed."""
        return time.monotonic() > self.at

    def remaining(self) -> float:
        """Seconds left before the deadline, clamped at zero."""
        return max(0.0, self.at - time.monotonic())
