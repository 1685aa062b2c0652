# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncmem/harness/run.py

"""Command-line entry point: run the constrained-random harness."""

from __future__ import annotations

import logging
import random
import time
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError

from syncmem.utils import configure_logger, ensure_dir, green, iso_utc, normalize_seed, red

from .harness_config import HarnessModel, apply_settings, get_args, load_config
from .orchestrator import HarnessResults, build_harness
from .scoreboard import ScoreboardError


def _get_logger(outdir: Path | None, verbosity: str) -> logging.Logger:
    """Console logging, plus <outdir>/run.log when an outdir is given."""
    log_file = outdir / "run.log" if outdir else None
    logger = configure_logger(verbosity, log_file)
    if log_file:
        logger.info("Logging to console and %s", log_file)
    return logger


def _get_config(
    config_file: str | None, cycles: int | None, seed: str | None
) -> HarnessModel:
    """Config file < env/plusargs < command line."""
    update: dict[str, int] = {}
    if cycles is not None:
        update["cycles"] = cycles
    if seed is not None:
        update["seed"] = normalize_seed(random.Random(), seed)
    try:
        config = apply_settings(load_config(config_file))
        if update:
            config = HarnessModel.model_validate({**config.model_dump(), **update})
    except ValidationError as exc:
        raise SystemExit(f"ERROR: Invalid configuration: {exc}") from exc
    if config.seed is None:
        # Pin a seed so every run can be reproduced from its log
        config = config.model_copy(update={"seed": random.getrandbits(32)})
    return config


def _log_results(
    results: HarnessResults, start_time: float, logger: logging.Logger
) -> None:
    logger.info("%s", results)
    elapsed = time.time() - start_time
    msg = (
        f"{results.cycles} cycles, {results.errors} errors, "
        f"seed={results.seed}, elapsed {elapsed:.3f}s"
    )
    if results.errors:
        logger.error(red(f"FAIL: {msg}"))
    else:
        logger.info(green(f"PASS: {msg}"))


def main(argv: Sequence[str] | None = None) -> int:
    """Run one harness session; return 0 on success, 1 on scoreboard errors."""
    args = get_args(argv, "Synchronous memory constrained-random harness")

    start_time = time.time()
    outdir = ensure_dir(args.outdir, make_if_not_exists=True) if args.outdir else None
    logger = _get_logger(outdir, args.verbosity)
    logger.info("start %s", iso_utc())

    config = _get_config(args.config, args.cycles, args.seed)
    logger.info("%s", config)

    orchestrator = build_harness(config)
    try:
        results = orchestrator.run()
    except ScoreboardError as exc:
        logger.error(red(f"FAIL: {exc}"))
        results = orchestrator.results()

    _log_results(results, start_time, logger)
    if outdir:
        path = results.save(outdir)
        logger.info("Results written to %s", path)
    return 1 if results.errors else 0


if __name__ == "__main__":
    raise SystemExit(main())
