# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncmem/harness/stimulus.py

"""Stimulus vectors and the constraint system that generates them.

StimulusVector is an immutable, width-checked snapshot of the five memory
inputs. Any in-range vector may be constructed; constraint legality is the
job of StimulusConstraints, which randomizes with cocotb-coverage's
constrained-random solver (the Python counterpart of SystemVerilog
randomize()) and re-checks every result independently.

Default constraints:
    addr == 111                          (fixed-address focused testing)
    reset -> wr_en == 0 and rd_en == 0

addr_mode="range" replaces the first constraint with
addr_min <= addr <= addr_max so the whole address decoder can be exercised.
"""

from __future__ import annotations

import json
import logging
from typing import Annotated, Any, Callable, Literal

from cocotb_coverage import crv
from pydantic import BaseModel, ConfigDict, Field

from .mem_model import DATA_MASK, MEM_DEPTH

logger = logging.getLogger(__name__)

FOCUS_ADDR = 111

AddrMode = Literal["fixed", "range"]


class ConstraintViolation(RuntimeError):
    """A generated vector does not satisfy its constraints (generator defect)."""


class StimulusVector(BaseModel):
    """One set of memory input values for a single tick."""

    model_config = ConfigDict(frozen=True)

    reset: bool = False
    wr_en: bool = False
    rd_en: bool = False
    wr_data: Annotated[int, Field(ge=0, le=DATA_MASK)] = 0
    addr: Annotated[int, Field(ge=0, lt=MEM_DEPTH)] = 0

    def to_dict(self) -> dict[str, object]:
        """Structured view for logging/JSON."""
        return self.model_dump()

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True)


class StimulusConstraints(crv.Randomized):  # pylint: disable=too-many-instance-attributes
    """Randomizable input vector with the harness constraints attached.

    Example:
        >>> c = StimulusConstraints()
        >>> v = c.randomize_vector()
        >>> v.addr
        111
        >>> c.check(v)
    """

    def __init__(
        self,
        addr_mode: AddrMode = "fixed",
        fixed_addr: int = FOCUS_ADDR,
        addr_min: int = 0,
        addr_max: int = MEM_DEPTH - 1,
    ) -> None:
        crv.Randomized.__init__(self)
        if addr_mode not in ("fixed", "range"):
            raise ValueError(f"{addr_mode=}")
        if not 0 <= fixed_addr < MEM_DEPTH:
            raise ValueError(f"{fixed_addr=}")
        if not 0 <= addr_min <= addr_max < MEM_DEPTH:
            raise ValueError(f"{addr_min=} {addr_max=}")

        self.addr_mode: AddrMode = addr_mode
        self.fixed_addr = fixed_addr
        self.addr_min = addr_min
        self.addr_max = addr_max

        # Random fields (solver writes these on randomize())
        self.reset = 0
        self.wr_en = 0
        self.rd_en = 0
        self.wr_data = 0
        self.addr = fixed_addr if addr_mode == "fixed" else addr_min

        self.add_rand("reset", [0, 1])
        self.add_rand("wr_en", [0, 1])
        self.add_rand("rd_en", [0, 1])
        self.add_rand("wr_data", list(range(DATA_MASK + 1)))
        self.add_rand("addr", list(range(MEM_DEPTH)))

        # crv binds constraint arguments to fields by parameter name, and
        # requires those names in alphabetical order
        self._addr_ok = self._make_addr_predicate()
        self.add_constraint(self._addr_ok)
        self.add_constraint(_reset_excludes_access)

    def _make_addr_predicate(self) -> Callable[[int], bool]:
        if self.addr_mode == "fixed":
            target = self.fixed_addr
            return lambda addr: addr == target
        lo, hi = self.addr_min, self.addr_max
        return lambda addr: lo <= addr <= hi

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def randomize_vector(self, *constraints: Callable[..., Any]) -> StimulusVector:
        """Randomize (optionally with inline constraints) and snapshot.

        crv lets an inline constraint replace a class constraint over the
        same variables, so the result is checked before it is returned;
        an inline constraint that loosens the address or reset rule raises
        ConstraintViolation.
        """
        if constraints:
            self.randomize_with(*constraints)
        else:
            self.randomize()
        vector = StimulusVector(
            reset=bool(self.reset),
            wr_en=bool(self.wr_en),
            rd_en=bool(self.rd_en),
            wr_data=int(self.wr_data),
            addr=int(self.addr),
        )
        self.check(vector)
        return vector

    # ------------------------------------------------------------------
    # Checking
    # ------------------------------------------------------------------

    def check(self, vector: StimulusVector) -> None:
        """Raise ConstraintViolation unless vector satisfies every constraint."""
        if not self._addr_ok(vector.addr):
            if self.addr_mode == "fixed":
                expect = f"addr == {self.fixed_addr}"
            else:
                expect = f"{self.addr_min} <= addr <= {self.addr_max}"
            raise ConstraintViolation(f"{expect} violated by {vector}")
        if not _reset_excludes_access(vector.rd_en, vector.reset, vector.wr_en):
            raise ConstraintViolation(f"reset -> !wr_en && !rd_en violated by {vector}")

    def describe(self) -> str:
        """Human-readable list of the active constraints."""
        if self.addr_mode == "fixed":
            addr_c = f"addr == {self.fixed_addr}"
        else:
            addr_c = f"{self.addr_min} <= addr <= {self.addr_max}"
        return f"{addr_c}; reset -> !wr_en && !rd_en"


def _reset_excludes_access(rd_en: int, reset: int, wr_en: int) -> bool:
    return not reset or (not wr_en and not rd_en)
