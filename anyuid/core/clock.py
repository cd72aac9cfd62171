"""Clocks.

.. autosummary::
   :toctree: .

   Clock
   SystemClock
   FixedClock

A clock returns the local time together with its sub-second field, both taken
from a single reading.
"""

from __future__ import annotations

import time
from datetime import datetime
from typing import Literal, Protocol

from ..errors import InvalidArgument

Precision = Literal["ns", "ms"]


class Clock(Protocol):
    """Source of the current local time."""

    def now(self) -> tuple[datetime, int]:
        """Return the local time and its sub-second field."""
        ...


class SystemClock:
    """Wall clock of the host.

    Args:
        precision: `"ns"` for nanoseconds, `"ms"` for milliseconds.
    """

    def __init__(self, precision: Precision = "ns"):
        if precision not in ("ns", "ms"):
            raise InvalidArgument(f"precision must be 'ns' or 'ms', got {precision!r}")
        self.precision = precision

    def __repr__(self) -> str:
        return f"SystemClock(precision={self.precision!r})"

    def now(self) -> tuple[datetime, int]:
        ns = time.time_ns()
        seconds, subsecond = divmod(ns, 1_000_000_000)
        if self.precision == "ms":
            subsecond //= 1_000_000
        return datetime.fromtimestamp(seconds), subsecond


class FixedClock:
    """Clock stopped at `moment`."""

    def __init__(self, moment: datetime, subsecond: int = 0):
        self.moment = moment
        self.subsecond = subsecond

    def __repr__(self) -> str:
        return f"FixedClock({self.moment!r}, {self.subsecond!r})"

    def now(self) -> tuple[datetime, int]:
        return self.moment, self.subsecond
