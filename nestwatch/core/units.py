"""Time units with truncating integer conversion."""

from __future__ import annotations

from enum import Enum
from typing import Union


class TimeUnit(Enum):
    """Duration units, each mapped to (length in nanoseconds, suffix)."""

    NANOSECONDS = (1, "ns")
    MICROSECONDS = (1_000, "micros")
    MILLISECONDS = (1_000_000, "ms")
    SECONDS = (1_000_000_000, "s")
    MINUTES = (60_000_000_000, "m")
    HOURS = (3_600_000_000_000, "h")
    DAYS = (86_400_000_000_000, "d")

    @property
    def nanos(self) -> int:
        return self.value[0]

    @property
    def suffix(self) -> str:
        return self.value[1]

    @property
    def is_fine(self) -> bool:
        """Whether this unit needs a nanosecond clock to be meaningful."""

        return self.nanos < TimeUnit.MILLISECONDS.nanos

    def convert(self, value: int, source: "TimeUnit") -> int:
        """Convert ``value`` expressed in ``source`` into this unit.

        Conversion to a coarser unit truncates, e.g. 1999ms -> 1s.
        """

        return value * source.nanos // self.nanos

    def format(self, value: int) -> str:
        return f"{value}{self.suffix}"

    @classmethod
    def parse(cls, value: Union["TimeUnit", str]) -> "TimeUnit":
        """Resolve a unit from a member, its name or its suffix."""

        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for unit in cls:
            if text.upper() == unit.name or text == unit.suffix:
                return unit
        raise ValueError(f"Unknown time unit: {value!r}")


__all__ = ["TimeUnit"]
