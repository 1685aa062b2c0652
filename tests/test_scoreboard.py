# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: tests/test_scoreboard.py

from __future__ import annotations

import pytest
from conftest import vec

from syncmem.harness import (
    HarnessModel,
    MemoryModel,
    MemPredictor,
    Scoreboard,
    ScoreboardError,
    build_harness,
)


def test_predictor_follows_port_contract() -> None:
    p = MemPredictor()
    assert p.predict(vec(wr_en=True, wr_data=0x5A)) == (0, 0x5A)
    assert p.predict(vec(wr_en=True, rd_en=True, wr_data=0x77)) == (0x5A, 0x77)
    assert p.predict(vec()) == (0x5A, 0x77)
    assert p.predict(vec(reset=True)) == (0, None)
    assert p.value_at(111) == 0


def test_matching_observations_pass() -> None:
    sb = Scoreboard()
    assert sb.check(1, vec(wr_en=True, wr_data=9), rd_data=0, stored=9)
    assert sb.check(2, vec(rd_en=True), rd_data=9, stored=9)
    assert sb.passed
    assert (sb.vect_cnt, sb.pass_cnt, sb.err_cnt) == (2, 2, 0)


def test_reset_cycle_ignores_storage() -> None:
    sb = Scoreboard()
    assert sb.check(1, vec(reset=True), rd_data=0, stored=0xEE)


def test_mismatch_raises_at_quit_count() -> None:
    sb = Scoreboard(fail_on_error=True, error_quit_count=2)
    assert not sb.check(1, vec(wr_en=True, wr_data=1), rd_data=0, stored=0)
    with pytest.raises(ScoreboardError, match="errors=2"):
        sb.check(2, vec(rd_en=True), rd_data=0, stored=1)
    assert not sb.passed


def test_mismatch_counted_when_not_failing() -> None:
    sb = Scoreboard(fail_on_error=False)
    for c in range(1, 4):
        assert not sb.check(c, vec(rd_en=True), rd_data=0xFF, stored=0)
    assert sb.err_cnt == 3
    assert sb.vect_cnt == 3


def test_no_checks_is_not_a_pass() -> None:
    assert not Scoreboard().passed


class _StuckOutputModel(MemoryModel):
    """Output register bit 0 stuck high."""

    def tick(self, reset, wr_en, rd_en, wr_data, addr) -> int:  # type: ignore[override]
        return super().tick(reset, wr_en, rd_en, wr_data, addr) | 0x01


def test_corrupted_model_is_flagged() -> None:
    orch = build_harness(HarnessModel(cycles=5, seed=3))
    # Swap in the corrupted model on the clock edge
    broken = _StuckOutputModel()
    orch.model = broken
    orch.clock = type(orch.clock)()
    orch.clock.add_listener(lambda: broken.clock_edge(orch.bus))
    with pytest.raises(ScoreboardError):
        orch.run()
    assert orch.scoreboard is not None
    assert orch.scoreboard.err_cnt == 1
    assert len(orch.records) == 1
