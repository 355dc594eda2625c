"""Nested event stack with per-path aggregation."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, TextIO, Union

from ..report.schemas import EventModel, ReportModel
from ..report.text import format_report, write_report
from ..utils.logging import logger
from .clock import TimeSource
from .event import NAME_WIDTH, EventRecord
from .units import TimeUnit

DEFAULT_NAME = "stopwatch"


@dataclass
class StopwatchConfig:
    """Construction options, usually filled from a Hydra config group."""

    resolution: str = "milliseconds"
    default_name: str = DEFAULT_NAME
    name_width: int = NAME_WIDTH


class Stopwatch:
    """Time nested named events and aggregate them by dotted path.

    Every ``start`` pushes an open event whose parent is the event on top of
    the stack. ``stop(name)`` pops up to and including the most recent open
    event called ``name``; anything above it is closed at the same instant.
    Closed events are merged into one record per path.

    Args:
        resolution: Unit used for ``get_time`` and the report. Nanoseconds and
            microseconds select the monotonic nanosecond clock, anything
            coarser the millisecond wall clock.
        time_source: Override for the clock, any object with ``now()`` and
            ``unit``.
        default_name: Name used when ``start``/``stop``/``get_event`` get none.
        name_width: Minimum width of the path column in the report.
    """

    def __init__(
        self,
        resolution: Union[TimeUnit, str] = TimeUnit.MILLISECONDS,
        time_source: Optional[TimeSource] = None,
        default_name: str = DEFAULT_NAME,
        name_width: int = NAME_WIDTH,
    ):
        self.resolution = TimeUnit.parse(resolution)
        self.time_source = time_source or TimeSource.for_resolution(self.resolution)
        self.default_name = default_name
        self.name_width = name_width
        self._stack: List[EventRecord] = []
        self._registry: Dict[str, EventRecord] = {}
        self._lock = threading.RLock()

    @classmethod
    def from_config(cls, config: StopwatchConfig) -> "Stopwatch":
        return cls(
            resolution=config.resolution,
            default_name=config.default_name,
            name_width=config.name_width,
        )

    # ------------------------------------------------------------------
    # start / stop
    # ------------------------------------------------------------------

    def start(self, name: Optional[str] = None) -> None:
        name = self.default_name if name is None else name
        with self._lock:
            parent = self._stack[-1].path if self._stack else None
            instant, unit = self.time_source.now()
            event = EventRecord(name, parent, instant, native_unit=unit, resolution=self.resolution)
            self._stack.append(event)
            logger.debug("Started {}", event.path)

    def stop(self, name: Optional[str] = None) -> Optional[EventRecord]:
        """Stop the most recent open event called ``name``.

        Returns the accumulated record for its path, or ``None`` when no open
        event has that name, in which case nothing changes.
        """

        name = self.default_name if name is None else name
        with self._lock:
            if not any(event.name == name for event in self._stack):
                logger.debug("Ignoring stop of {!r}: no such event is running", name)
                return None

            instant, _ = self.time_source.now()
            while self._stack:
                event = self._stack.pop().close(instant)
                record = self._record(event)
                if event.name == name:
                    logger.debug("Stopped {} after {}", event.path, event.get_time_with_units())
                    return record
                logger.debug("Closed {} with its ancestor {!r}", event.path, name)
            return None

    @contextmanager
    def track(self, name: Optional[str] = None) -> Iterator[None]:
        """Time the enclosed block as one event."""

        self.start(name)
        try:
            yield
        finally:
            self.stop(name)

    def _record(self, event: EventRecord) -> EventRecord:
        existing = self._registry.get(event.path)
        if existing is None:
            self._registry[event.path] = event
            return event
        existing.merge(event)
        return existing

    # ------------------------------------------------------------------
    # queries
    # ------------------------------------------------------------------

    def get_event(self, path: Optional[str] = None) -> Optional[EventRecord]:
        """Completed record at ``path``; open events are not visible."""

        path = self.default_name if path is None else path
        with self._lock:
            return self._registry.get(path)

    def events(self) -> List[EventRecord]:
        with self._lock:
            return [self._registry[path] for path in sorted(self._registry)]

    def running(self) -> List[str]:
        """Names of open events, outermost first."""

        with self._lock:
            return [event.name for event in self._stack]

    @property
    def depth(self) -> int:
        with self._lock:
            return len(self._stack)

    # ------------------------------------------------------------------
    # reporting
    # ------------------------------------------------------------------

    def report(self, sink: Optional[TextIO] = None) -> Optional[str]:
        """Write the report to ``sink``, or return it as text without one."""

        with self._lock:
            if sink is None:
                return format_report(self)
            write_report(self, sink)
            return None

    def snapshot(self, unit: Optional[Union[TimeUnit, str]] = None) -> ReportModel:
        unit = TimeUnit.parse(unit) if unit is not None else self.resolution
        with self._lock:
            return ReportModel(
                resolution=unit.suffix,
                events=[EventModel.from_record(record, unit) for record in self.events()],
                running=self.running(),
            )


__all__ = ["DEFAULT_NAME", "Stopwatch", "StopwatchConfig"]
