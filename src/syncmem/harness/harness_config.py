# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncmem/harness/harness_config.py

"""Harness configuration: validated model, file loading and CLI parsing."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Annotated, Literal, Self, Sequence, cast

import yaml
from pydantic import BaseModel, Field, NonNegativeInt, PositiveInt, model_validator

from syncmem import utils_cli

from .mem_model import MEM_DEPTH
from .stimulus import FOCUS_ADDR

logger = logging.getLogger(__name__)

AddrValue = Annotated[int, Field(ge=0, lt=MEM_DEPTH)]


class HarnessModel(BaseModel):
    """Everything a harness run needs, validated.

    Only cycles and seed are part of the run contract; the rest tune the
    constraint system and the checkers.
    """

    cycles: PositiveInt = 10
    seed: int | None = None
    addr_mode: Literal["fixed", "range"] = "fixed"
    fixed_addr: AddrValue = FOCUS_ADDR
    addr_min: AddrValue = 0
    addr_max: AddrValue = MEM_DEPTH - 1
    channel_capacity: PositiveInt | None = None
    check_en: bool = True
    coverage_en: bool = True
    fail_on_error: bool = True
    error_quit_count: NonNegativeInt = 1

    @model_validator(mode="after")
    def _check_addr_range(self) -> Self:
        if self.addr_min > self.addr_max:
            raise ValueError(f"{self.addr_min=} must be <= {self.addr_max=}")
        return self

    def __str__(self) -> str:
        """Return JSON-formatted string representation of the model."""
        return f"{self.__class__.__name__}:\n" + json.dumps(self.model_dump(), indent=2)

    def save(self, outdir: Path, name: str = "") -> None:
        """Save the model to <outdir>/<name>.json."""
        name = name if name else self.__class__.__name__
        (outdir / f"{name}.json").write_text(
            json.dumps(self.model_dump(), indent=2) + "\n"
        )


def load_config(path: str | Path | None) -> HarnessModel:
    """Load a YAML/JSON config file (or defaults when path is None)."""
    if path is None:
        return HarnessModel()
    p = Path(path)
    if not p.exists():
        raise SystemExit(f"ERROR: Config file not found: {p}")
    with open(p, encoding="utf-8") as f:
        s = f.read()
    logger.debug("Input config:\n%s", s)
    # JSON is a subset of YAML
    data = yaml.safe_load(s) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{p}: top level must be a mapping, got {type(data).__name__}")
    return HarnessModel.model_validate(cast(dict, data))


def apply_settings(model: HarnessModel) -> HarnessModel:
    """Overlay SYNCMEM_CYCLES / SYNCMEM_SEED from env or plusargs."""
    update: dict[str, int] = {}
    cycles = utils_cli.get_opt_int_setting("SYNCMEM_CYCLES")
    if cycles is not None:
        update["cycles"] = cycles
    seed = utils_cli.get_opt_int_setting("SYNCMEM_SEED")
    if seed is not None:
        update["seed"] = seed
    if not update:
        return model
    # Re-validate so overrides obey the same field rules
    return HarnessModel.model_validate({**model.model_dump(), **update})


def get_args(
    argv: Sequence[str] | None = None, description: str = ""
) -> argparse.Namespace:
    """Parse command line arguments for the harness entry point."""
    ap = argparse.ArgumentParser(
        description=description,
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    ap.add_argument("config", nargs="?", help="YAML/JSON config file path")
    ap.add_argument("--cycles", type=int, help="number of cycles (overrides config)")
    ap.add_argument(
        "--seed", help="random seed: decimal, 0x..., or 'random' (overrides config)"
    )
    ap.add_argument("--outdir", help="write run.log and results.json here")
    ap.add_argument(
        "--verbosity",
        choices=["critical", "error", "warning", "info", "debug"],
        default="info",
        help="logging level",
    )
    return ap.parse_args(argv)
