"""Hierarchical stopwatch: nested named events aggregated per dotted path."""

from importlib.metadata import version

from loguru import logger

from .core.clock import ClockKind, TimeSource
from .core.event import EventRecord
from .core.stopwatch import DEFAULT_NAME, Stopwatch, StopwatchConfig
from .core.units import TimeUnit

logger.disable("nestwatch")

__all__ = [
    "__version__",
    "ClockKind",
    "DEFAULT_NAME",
    "EventRecord",
    "Stopwatch",
    "StopwatchConfig",
    "TimeSource",
    "TimeUnit",
]


def __getattr__(name: str) -> str:
    if name == "__version__":
        try:
            return version("nestwatch")
        except Exception:  # pragma: no cover - fallback when pkg metadata missing
            return "0.1.0"
    raise AttributeError(name)
