"""Run a declarative tree of timed steps against a stopwatch."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, List, Mapping

from ..core.stopwatch import Stopwatch
from ..utils.logging import logger


@dataclass
class StepSpec:
    """One step of a timing plan.

    ``sleep`` seconds are split evenly around the children. A step with
    ``leave_open`` is started but never stopped by the plan itself, so with
    ``repeat > 1`` each repeat nests under the previous one (``x.x.x``).
    """

    name: str
    sleep: float = 0.0
    repeat: int = 1
    children: List["StepSpec"] = field(default_factory=list)
    leave_open: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "StepSpec":
        name = data.get("name")
        if not name:
            raise ValueError(f"Step is missing a name: {dict(data)!r}")
        sleep = float(data.get("sleep", 0.0))
        repeat = int(data.get("repeat", 1))
        if sleep < 0:
            raise ValueError(f"Step {name!r} has negative sleep {sleep}")
        if repeat < 0:
            raise ValueError(f"Step {name!r} has negative repeat {repeat}")
        children = [cls.from_dict(child) for child in data.get("children", None) or []]
        return cls(
            name=str(name),
            sleep=sleep,
            repeat=repeat,
            children=children,
            leave_open=bool(data.get("leave_open", False)),
        )


def run_plan(
    stopwatch: Stopwatch,
    steps: Iterable[StepSpec],
    sleep: Callable[[float], None] = time.sleep,
) -> Stopwatch:
    for step in steps:
        for _ in range(step.repeat):
            stopwatch.start(step.name)
            sleep(step.sleep / 2)
            run_plan(stopwatch, step.children, sleep=sleep)
            sleep(step.sleep / 2)
            if step.leave_open:
                logger.debug("Leaving {} running", step.name)
                continue
            stopwatch.stop(step.name)
    return stopwatch


__all__ = ["StepSpec", "run_plan"]
