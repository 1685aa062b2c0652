# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncmem/harness/scoreboard.py

"""Self-checking scoreboard for the harness.

The predictor keeps its own sparse view of the memory (only written
addresses are stored; everything else reads as zero) and its own predicted
output register. It is deliberately independent of MemoryModel so the
comparison means something.

Architecture:
    applied vector -> predict() -> expected rd_data / storage[addr]
    observed model -> check()   -> PASS / MISMATCH

Statistics:
    vect_cnt: Total number of comparisons performed
    pass_cnt: Number of passing comparisons
    err_cnt: Number of failing comparisons
"""

from __future__ import annotations

import logging

from syncmem.utils import green, red

from .mem_model import DATA_MASK
from .stimulus import StimulusVector

logger = logging.getLogger(__name__)


class ScoreboardError(AssertionError):
    """The scoreboard reached its error_quit_count."""


class MemPredictor:
    """Expected-value model built from the memory's port contract."""

    def __init__(self) -> None:
        self._written: dict[int, int] = {}
        self.rd_data: int = 0

    def value_at(self, addr: int) -> int:
        return self._written.get(addr, 0)

    def predict(self, v: StimulusVector) -> tuple[int, int | None]:
        """Advance one edge; return (expected rd_data, expected storage[addr]).

        Storage is not predicted (None) for reset edges.
        """
        if v.reset:
            self._written.clear()
            self.rd_data = 0
            return self.rd_data, None
        before = self.value_at(v.addr)
        if v.wr_en:
            self._written[v.addr] = v.wr_data & DATA_MASK
        if v.rd_en:
            self.rd_data = before
        return self.rd_data, self.value_at(v.addr)


class Scoreboard:
    """Compare observed outputs against MemPredictor, cycle by cycle."""

    def __init__(self, fail_on_error: bool = True, error_quit_count: int = 1) -> None:
        self.predictor = MemPredictor()
        self.fail_on_error = fail_on_error
        self.error_quit_count = max(0, error_quit_count)
        self.vect_cnt: int = 0
        self.pass_cnt: int = 0
        self.err_cnt: int = 0

    def check(
        self, cycle: int, vector: StimulusVector, rd_data: int, stored: int
    ) -> bool:
        """Check one cycle; return True on PASS."""
        exp_rd, exp_stored = self.predictor.predict(vector)
        self.vect_cnt += 1
        ok = rd_data == exp_rd and (exp_stored is None or stored == exp_stored)
        if ok:
            self.pass_cnt += 1
            logger.debug(
                "PASS cycle=%d rd_data=0x%02x vect_cnt=%d", cycle, rd_data, self.vect_cnt
            )
            return True

        self.err_cnt += 1
        logger.error(
            "MISMATCH cycle=%d vector=%s exp.rd_data=%s act.rd_data=%s "
            "exp.storage=%s act.storage=%s",
            cycle,
            vector,
            exp_rd,
            rd_data,
            exp_stored,
            stored,
        )
        if (
            self.fail_on_error
            and self.error_quit_count
            and self.err_cnt >= self.error_quit_count
        ):
            raise ScoreboardError(
                f"Scoreboard error_quit_count exceeded "
                f"(errors={self.err_cnt}, threshold={self.error_quit_count})"
            )
        return False

    @property
    def passed(self) -> bool:
        return self.vect_cnt > 0 and self.err_cnt == 0

    def report(self) -> None:
        if self.passed:
            logger.info(
                green("*** TEST PASSED - %d ran, %d passed ***"),
                self.vect_cnt,
                self.pass_cnt,
            )
        else:
            logger.error(
                red("*** TEST FAILED - %d ran, %d passed, %d failed ***"),
                self.vect_cnt,
                self.pass_cnt,
                self.err_cnt,
            )
