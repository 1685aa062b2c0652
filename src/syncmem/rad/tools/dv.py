# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncmem/rad/tools/dv.py

"""Build and run the rad_sync_mem UVM bench via the cocotb runner.

Command-line interface:
    syncmem-dv [--cmd {build,test,both}] [--sim {icarus,verilator}]
               [--seeds SEED ...] [--seq-len N] [--outdir DIR]

Typical usage:
    # Build and run with seed 42
    syncmem-dv

    # Three seeds, 200 edges each
    syncmem-dv --seeds 1 2 0x10 --seq-len 200
"""

from __future__ import annotations

import argparse
import logging
import os
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Final, Sequence

from cocotb_tools.runner import get_results, get_runner

from syncmem import utils

logger = logging.getLogger(__name__)

DESIGN: Final[str] = "rad_sync_mem"
RAD_ROOT: Final[Path] = utils.get_package_root() / "rad"
TEST_MODULE: Final[str] = f"syncmem.rad.{DESIGN}.dv.test_{DESIGN}"
DEFAULT_OUT_DIR = "out_dv"


@dataclass(frozen=True)
class BuildCfg:
    """Build configuration."""

    sim: str
    waves: bool
    build_dir: Path
    sources: list[Path]
    build_force: bool


@dataclass(frozen=True)
class TestCfg:  # pylint: disable=too-many-instance-attributes
    """Test configuration."""

    sim: str
    waves: bool
    build_dir: Path
    seed: int
    test_dir: Path
    extra_plusargs: list[str]
    extra_env: dict[str, str]


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    ap = argparse.ArgumentParser(
        description="Run the rad_sync_mem UVM bench via cocotb and pyuvm",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    ap.add_argument(
        "--cmd",
        choices=["build", "test", "both"],
        default=os.getenv("CMD", "both"),
        help="run only build, only test, or both",
    )
    ap.add_argument(
        "--sim",
        choices=["icarus", "verilator"],
        default=os.getenv("SIM", "icarus"),
        help="simulator",
    )
    ap.add_argument("--outdir", default=DEFAULT_OUT_DIR, help="output directory")
    ap.add_argument(
        "--verbosity",
        choices=["critical", "error", "warning", "info", "debug"],
        default=os.getenv("VERBOSITY", "info"),
        help="logging level for Python/pyuvm/cocotb",
    )
    ap.add_argument("--waves", action="store_true", help="enable waveforms")
    ap.add_argument("--build-force", action="store_true", help="force a build")
    ap.add_argument(
        "--seeds",
        nargs="+",
        metavar="SEED",
        help="seed list (decimal, 0x..., or 'random')",
    )
    ap.add_argument("--seq-len", type=int, default=10, help="edges per test")
    ap.add_argument(
        "--addr-mode", choices=["fixed", "range"], default="fixed", help="address mode"
    )
    ap.add_argument(
        "--check-en", choices=["0", "1"], default="1", help="enable checkers"
    )
    ap.add_argument(
        "--coverage-en", choices=["0", "1"], default="1", help="enable coverage"
    )
    return ap.parse_args(argv)


def _derive_seeds(args: argparse.Namespace) -> list[int]:
    rng = random.Random()
    if args.seeds:
        return [utils.normalize_seed(rng, s) for s in args.seeds]
    return [42]


def get_build_cfg(args: argparse.Namespace) -> BuildCfg:
    outdir = Path(args.outdir).resolve()
    return BuildCfg(
        sim=args.sim,
        waves=bool(args.waves),
        build_dir=outdir / "builds" / f"{DESIGN}.{args.sim}",
        sources=[RAD_ROOT / DESIGN / "rtl" / f"{DESIGN}.sv"],
        build_force=bool(args.build_force),
    )


def get_test_cfg(args: argparse.Namespace, build: BuildCfg, seed: int) -> TestCfg:
    outdir = Path(args.outdir).resolve()
    test_dir = outdir / "tests" / f"{DESIGN}.{args.sim}.{seed}"
    test_dir.mkdir(parents=True, exist_ok=True)
    extra_plusargs = [
        f"+CHECK_EN={args.check_en}",
        f"+COVERAGE_EN={args.coverage_en}",
        f"+RAD_SYNC_MEM_SEQ_LEN={args.seq_len}",
        f"+RAD_SYNC_MEM_ADDR_MODE={args.addr_mode}",
    ]
    extra_env = {
        "COCOTB_RANDOM_SEED": str(seed),
        "COCOTB_LOG_LEVEL": str(args.verbosity).upper(),
        "COCOTB_PLUSARGS": " ".join(extra_plusargs),
        "COV_YAML": str(test_dir / "coverage.yaml"),
    }
    return TestCfg(
        sim=build.sim,
        waves=build.waves,
        build_dir=build.build_dir,
        seed=seed,
        test_dir=test_dir,
        extra_plusargs=extra_plusargs,
        extra_env=extra_env,
    )


def run_build(cfg: BuildCfg) -> None:
    """Execute the HDL build step using cocotb runner."""
    logger.info("running build: %s", cfg.build_dir)
    runner = get_runner(cfg.sim)
    runner.build(
        sources=cfg.sources,
        hdl_toplevel=DESIGN,
        timescale=("1ns", "1ps"),
        waves=cfg.waves,
        build_dir=cfg.build_dir,
        always=cfg.build_force,
    )


def run_test(cfg: TestCfg) -> Path:
    """Execute a single test run; return the results.xml path."""
    logger.info("running test: seed=%d dir=%s", cfg.seed, cfg.test_dir)
    runner = get_runner(cfg.sim)
    return runner.test(
        hdl_toplevel_lang="verilog",
        hdl_toplevel=DESIGN,
        waves=cfg.waves,
        build_dir=cfg.build_dir,
        test_dir=cfg.test_dir,
        test_module=TEST_MODULE,
        seed=cfg.seed,
        plusargs=cfg.extra_plusargs,
        extra_env=cfg.extra_env,
        results_xml=str(cfg.test_dir / "results.xml"),
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Build and/or run the bench for each seed; return 0 on success."""
    args = parse_args(argv)
    utils.configure_logger(args.verbosity)

    build = get_build_cfg(args)
    if args.cmd in {"build", "both"}:
        run_build(build)
    if args.cmd == "build":
        return 0

    rc = 0
    for seed in _derive_seeds(args):
        results_xml = run_test(get_test_cfg(args, build, seed))
        # runner.test() does not raise on failing cocotb tests
        _, failures = get_results(results_xml)
        if failures:
            logger.error(utils.red("FAIL: seed=%d failures=%d"), seed, failures)
            rc = 1
        else:
            logger.info(utils.green("PASS: seed=%d"), seed)
    return rc


if __name__ == "__main__":
    raise SystemExit(main())
