"""Clock selection for the stopwatch."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .units import TimeUnit


class ClockKind(str, Enum):
    COARSE = "coarse"
    FINE = "fine"


@dataclass(frozen=True)
class TimeSource:
    """Read the current instant from a wall-clock (coarse) or monotonic (fine) clock."""

    kind: ClockKind = ClockKind.COARSE

    @classmethod
    def for_resolution(cls, resolution: TimeUnit) -> "TimeSource":
        return cls(ClockKind.FINE if resolution.is_fine else ClockKind.COARSE)

    @property
    def unit(self) -> TimeUnit:
        if self.kind is ClockKind.FINE:
            return TimeUnit.NANOSECONDS
        return TimeUnit.MILLISECONDS

    def now(self) -> Tuple[int, TimeUnit]:
        if self.kind is ClockKind.FINE:
            return time.monotonic_ns(), TimeUnit.NANOSECONDS
        return time.time_ns() // 1_000_000, TimeUnit.MILLISECONDS


__all__ = ["ClockKind", "TimeSource"]
