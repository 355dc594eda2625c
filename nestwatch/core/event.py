"""Event records aggregated by the stopwatch."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .units import TimeUnit

NAME_WIDTH = 24


@dataclass
class EventRecord:
    """One named interval and everything accumulated under its path.

    While the event is open ``raw_duration`` holds the start instant read from
    the time source. :meth:`close` turns it into the elapsed delta. Once
    closed, ``raw_duration`` (in ``native_unit``) and ``count`` only ever
    grow. Conversions to ``resolution`` happen at read time.
    """

    name: str
    parent_path: Optional[str]
    raw_duration: int
    native_unit: TimeUnit = TimeUnit.MILLISECONDS
    resolution: TimeUnit = TimeUnit.MILLISECONDS
    count: int = 0

    @property
    def path(self) -> str:
        if self.parent_path is None:
            return self.name
        return f"{self.parent_path}.{self.name}"

    def close(self, instant: int) -> "EventRecord":
        # wall clocks can step backwards; durations never go negative
        self.raw_duration = max(0, instant - self.raw_duration)
        self.count = 1
        return self

    def merge(self, other: "EventRecord") -> None:
        self.raw_duration += self.native_unit.convert(other.raw_duration, other.native_unit)
        self.count += other.count

    def get_count(self) -> int:
        return self.count

    def get_time(self, unit: Optional[TimeUnit] = None) -> int:
        """Total duration in ``unit``, defaulting to the record's resolution."""

        return (unit or self.resolution).convert(self.raw_duration, self.native_unit)

    def get_time_with_units(self, unit: Optional[TimeUnit] = None) -> str:
        unit = unit or self.resolution
        return unit.format(self.get_time(unit))

    def average(self, unit: Optional[TimeUnit] = None) -> int:
        if not self.count:
            return 0
        return self.get_time(unit) // self.count

    def render(self, width: int = NAME_WIDTH, unit: Optional[TimeUnit] = None) -> str:
        unit = unit or self.resolution
        line = f"{self.path:<{width}} {self.get_time_with_units(unit)}"
        if self.count < 2:
            return line
        return f"{line} ({self.count} @ {unit.format(self.average(unit))})"

    def __str__(self) -> str:
        return self.render()


__all__ = ["EventRecord", "NAME_WIDTH"]
