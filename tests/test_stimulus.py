# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: tests/test_stimulus.py

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from syncmem.harness import (
    FOCUS_ADDR,
    ConstraintViolation,
    StimulusConstraints,
    StimulusVector,
)


def _legal(v: StimulusVector) -> bool:
    return not v.reset or (not v.wr_en and not v.rd_en)


def test_vector_defaults_and_json() -> None:
    v = StimulusVector(wr_en=True, wr_data=0x5A, addr=111)
    assert json.loads(str(v)) == {
        "addr": 111,
        "rd_en": False,
        "reset": False,
        "wr_data": 0x5A,
        "wr_en": True,
    }


@pytest.mark.parametrize(
    "kw", [{"addr": 128}, {"addr": -1}, {"wr_data": 256}, {"wr_data": -1}]
)
def test_vector_rejects_out_of_width_fields(kw: dict) -> None:
    with pytest.raises(ValidationError):
        StimulusVector(**kw)


def test_vector_is_immutable() -> None:
    v = StimulusVector()
    with pytest.raises(ValidationError):
        v.addr = 3  # type: ignore[misc]


def test_any_in_range_vector_can_be_built() -> None:
    # Legality belongs to the constraint system, not the type
    v = StimulusVector(reset=True, wr_en=True, rd_en=True, addr=0)
    assert v.reset and v.wr_en and v.rd_en


def test_default_constraints_hold_over_many_draws() -> None:
    c = StimulusConstraints()
    seen_reset = seen_wr = seen_rd = False
    for _ in range(300):
        v = c.randomize_vector()
        assert v.addr == FOCUS_ADDR
        assert _legal(v)
        c.check(v)
        seen_reset |= v.reset
        seen_wr |= v.wr_en
        seen_rd |= v.rd_en
    assert seen_reset and seen_wr and seen_rd


def test_range_mode_stays_in_range() -> None:
    c = StimulusConstraints(addr_mode="range", addr_min=10, addr_max=20)
    addrs = set()
    for _ in range(300):
        v = c.randomize_vector()
        assert 10 <= v.addr <= 20
        assert _legal(v)
        addrs.add(v.addr)
    assert len(addrs) > 1


def test_inline_constraint_forces_reset() -> None:
    c = StimulusConstraints()
    v = c.randomize_vector(lambda reset: reset == 1)
    assert v.reset
    assert not v.wr_en and not v.rd_en
    assert v.addr == FOCUS_ADDR


def test_check_rejects_wrong_address() -> None:
    with pytest.raises(ConstraintViolation, match="addr == 111"):
        StimulusConstraints().check(StimulusVector(addr=5))


def test_check_rejects_access_during_reset() -> None:
    c = StimulusConstraints()
    with pytest.raises(ConstraintViolation, match="reset"):
        c.check(StimulusVector(reset=True, wr_en=True, addr=111))
    with pytest.raises(ConstraintViolation, match="reset"):
        c.check(StimulusVector(reset=True, rd_en=True, addr=111))


def test_check_accepts_range_bounds() -> None:
    c = StimulusConstraints(addr_mode="range", addr_min=0, addr_max=127)
    c.check(StimulusVector(addr=0))
    c.check(StimulusVector(addr=127))


@pytest.mark.parametrize(
    "kw",
    [
        {"addr_mode": "random"},
        {"fixed_addr": 128},
        {"addr_mode": "range", "addr_min": 20, "addr_max": 10},
        {"addr_mode": "range", "addr_max": 128},
    ],
)
def test_bad_constraint_arguments(kw: dict) -> None:
    with pytest.raises(ValueError):
        StimulusConstraints(**kw)


def test_describe_names_active_constraints() -> None:
    assert StimulusConstraints().describe() == "addr == 111; reset -> !wr_en && !rd_en"
    assert "3 <= addr <= 9" in StimulusConstraints(
        addr_mode="range", addr_min=3, addr_max=9
    ).describe()


def test_inline_constraint_cannot_loosen_address() -> None:
    c = StimulusConstraints()
    with pytest.raises(ConstraintViolation, match="addr == 111"):
        c.randomize_vector(lambda addr: addr < 5)


def test_inline_constraint_cannot_loosen_reset_rule() -> None:
    c = StimulusConstraints()
    with pytest.raises(ConstraintViolation, match="reset"):
        c.randomize_vector(lambda rd_en, reset, wr_en: reset == 1 and wr_en == 1)
