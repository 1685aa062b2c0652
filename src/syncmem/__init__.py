# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncmem/__init__.py

"""syncmem: a synchronous memory model and its constrained-random harness.

Main Components:

harness:
    Pure-Python, cycle-based verification harness:
    - MemoryModel: 128 x 8-bit clocked memory with synchronous reset
    - StimulusVector / StimulusConstraints: constrained-random input vectors
    - VectorGenerator, HandoffChannel, Driver: stimulus pipeline
    - Orchestrator: logical clock, scoreboard and coverage per cycle

rad (Reusable Analog/Digital):
    RTL implementation of the same memory (rad_sync_mem) with a cocotb/pyuvm
    bench that uses the Python model as its reference model.

utils, utils_cli:
    Logging helpers and env/plusarg settings resolution.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as pkg_version

try:
    __version__ = pkg_version("syncmem")
except PackageNotFoundError:
    __version__ = "0+local"
