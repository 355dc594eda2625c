from __future__ import annotations

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from nestwatch.core.clock import ClockKind, TimeSource
from nestwatch.core.units import TimeUnit


def test_fine_resolutions_select_nanosecond_clock():
    for unit in (TimeUnit.NANOSECONDS, TimeUnit.MICROSECONDS):
        source = TimeSource.for_resolution(unit)
        assert source.kind is ClockKind.FINE
        assert source.unit is TimeUnit.NANOSECONDS


def test_coarse_resolutions_select_millisecond_clock():
    for unit in (TimeUnit.MILLISECONDS, TimeUnit.SECONDS, TimeUnit.MINUTES, TimeUnit.HOURS, TimeUnit.DAYS):
        source = TimeSource.for_resolution(unit)
        assert source.kind is ClockKind.COARSE
        assert source.unit is TimeUnit.MILLISECONDS


def test_now_reports_native_unit():
    instant, unit = TimeSource(ClockKind.COARSE).now()
    assert unit is TimeUnit.MILLISECONDS
    assert instant > 1_000_000_000_000  # after 2001 in epoch millis

    first, unit = TimeSource(ClockKind.FINE).now()
    second, _ = TimeSource(ClockKind.FINE).now()
    assert unit is TimeUnit.NANOSECONDS
    assert second >= first
