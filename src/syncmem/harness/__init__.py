# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncmem/harness/__init__.py

"""Cycle-based memory model and constrained-random stimulus harness."""

from __future__ import annotations

from .channel import ChannelEmpty, ChannelFull, HandoffChannel
from .coverage import HarnessCoverage
from .driver import Driver
from .generator import GeneratorExhausted, VectorGenerator
from .harness_config import HarnessModel, load_config
from .interface import MemBus
from .mem_model import (
    ADDR_WIDTH,
    DATA_WIDTH,
    MEM_DEPTH,
    MemoryModel,
    MemState,
    OutOfRangeAddress,
)
from .orchestrator import (
    CycleRecord,
    HarnessResults,
    Orchestrator,
    SimClock,
    build_harness,
)
from .scoreboard import MemPredictor, Scoreboard, ScoreboardError
from .stimulus import (
    FOCUS_ADDR,
    ConstraintViolation,
    StimulusConstraints,
    StimulusVector,
)

__all__ = [
    "ADDR_WIDTH",
    "DATA_WIDTH",
    "FOCUS_ADDR",
    "MEM_DEPTH",
    "ChannelEmpty",
    "ChannelFull",
    "ConstraintViolation",
    "CycleRecord",
    "Driver",
    "GeneratorExhausted",
    "HandoffChannel",
    "HarnessCoverage",
    "HarnessModel",
    "HarnessResults",
    "MemBus",
    "MemPredictor",
    "MemState",
    "MemoryModel",
    "Orchestrator",
    "OutOfRangeAddress",
    "Scoreboard",
    "ScoreboardError",
    "SimClock",
    "StimulusConstraints",
    "StimulusVector",
    "VectorGenerator",
    "build_harness",
    "load_config",
]
