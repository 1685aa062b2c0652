# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: tests/test_constraint_solver.py

"""StimulusConstraints against the real cocotb-coverage solver."""

from __future__ import annotations

import inspect

import pytest
from cocotb_coverage import crv

from syncmem.harness import StimulusConstraints
from syncmem.harness.stimulus import _reset_excludes_access


@pytest.mark.parametrize(
    "kw",
    [
        {},
        {"fixed_addr": 0},
        {"addr_mode": "range"},
        {"addr_mode": "range", "addr_min": 100, "addr_max": 127},
    ],
)
def test_constraints_register_with_solver(kw: dict) -> None:
    c = StimulusConstraints(**kw)
    assert isinstance(c, crv.Randomized)
    c.randomize()
    c.check(c.randomize_vector())


def test_constraint_parameters_are_alphabetical() -> None:
    params = list(inspect.signature(_reset_excludes_access).parameters)
    assert params == sorted(params)
