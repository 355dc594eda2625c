from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from nestwatch.core.stopwatch import Stopwatch
from nestwatch.utils.logging import logger, setup_logging


@pytest.fixture
def messages():
    setup_logging(level="DEBUG")
    captured = []
    sink_id = logger.add(lambda msg: captured.append(msg.record["message"]), level="DEBUG")
    yield captured
    logger.remove(sink_id)
    logger.disable("nestwatch")


def test_engine_logs_lifecycle(clock, messages):
    sut = Stopwatch(time_source=clock)
    sut.start("a")
    sut.start("b")
    clock.advance(3)
    sut.stop("a")
    sut.stop("ghost")

    assert "Started a.b" in messages
    assert "Closed a.b with its ancestor 'a'" in messages
    assert "Stopped a after 3ms" in messages
    assert "Ignoring stop of 'ghost': no such event is running" in messages


def test_setup_logging_writes_file(tmp_path, clock):
    log_file = tmp_path / "logs" / "nestwatch.log"
    setup_logging(log_file=log_file, level="DEBUG")
    try:
        sut = Stopwatch(time_source=clock)
        sut.start("x")
        sut.stop("x")
    finally:
        logger.remove()
        logger.disable("nestwatch")
    assert "Stopped x" in log_file.read_text(encoding="utf-8")
