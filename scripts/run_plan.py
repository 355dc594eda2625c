"""Time a configured plan of nested steps and print the report."""

from __future__ import annotations

import sys
from pathlib import Path

import hydra
from hydra.utils import to_absolute_path
from omegaconf import DictConfig, OmegaConf

from nestwatch.core.stopwatch import Stopwatch, StopwatchConfig
from nestwatch.runtime.session import StepSpec, run_plan
from nestwatch.utils.logging import logger, setup_logging


@hydra.main(config_path="../configs", config_name="plan", version_base=None)
def main(cfg: DictConfig) -> None:
    setup_logging(level=cfg.log_level)

    stopwatch_cfg = OmegaConf.to_container(cfg.stopwatch, resolve=True)
    assert isinstance(stopwatch_cfg, dict)
    stopwatch = Stopwatch.from_config(StopwatchConfig(**stopwatch_cfg))

    steps_cfg = OmegaConf.to_container(cfg.steps, resolve=True) or []
    assert isinstance(steps_cfg, list)
    steps = [StepSpec.from_dict(step) for step in steps_cfg]

    logger.info("Running {} top-level steps at {} resolution", len(steps), stopwatch.resolution.name.lower())
    run_plan(stopwatch, steps)

    fmt = cfg.output.format
    if fmt == "json":
        text = stopwatch.snapshot().model_dump_json(indent=2) + "\n"
    elif fmt == "text":
        text = stopwatch.report()
    else:
        raise ValueError(f"Unknown output format: {fmt!r}")

    if cfg.output.path:
        out_path = Path(to_absolute_path(cfg.output.path))
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text, encoding="utf-8")
        logger.info("Wrote report to {}", out_path)
    else:
        sys.stdout.write(text)


if __name__ == "__main__":
    main()
