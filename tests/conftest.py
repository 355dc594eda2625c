from __future__ import annotations

import sys
from pathlib import Path
from typing import Tuple

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from nestwatch.core.units import TimeUnit


class ManualClock:
    """Time source that only moves when told to."""

    def __init__(self, unit: TimeUnit = TimeUnit.MILLISECONDS, start: int = 1_000):
        self.unit = unit
        self.instant = start
        self.reads = 0

    def now(self) -> Tuple[int, TimeUnit]:
        self.reads += 1
        return self.instant, self.unit

    def advance(self, amount: int) -> None:
        self.instant += amount


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def nano_clock() -> ManualClock:
    return ManualClock(TimeUnit.NANOSECONDS)
