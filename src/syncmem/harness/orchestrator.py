# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncmem/harness/orchestrator.py

"""Cycle-level orchestration of the stimulus pipeline.

Per cycle, strictly in this order:

    1. VectorGenerator.next()  -> one vector into the HandoffChannel
    2. Driver.apply()          -> vector onto the MemBus inputs
    3. SimClock.posedge()      -> MemoryModel samples inputs, drives rd_data
    4. observe                 -> CycleRecord, scoreboard check, coverage

The run ends after exactly `cycles` cycles.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from pydantic import BaseModel

from .channel import HandoffChannel
from .coverage import HarnessCoverage
from .driver import Driver
from .generator import VectorGenerator
from .harness_config import HarnessModel
from .interface import MemBus
from .mem_model import MemoryModel, MemState
from .scoreboard import Scoreboard
from .stimulus import StimulusConstraints, StimulusVector

logger = logging.getLogger(__name__)

EdgeListener = Callable[[], object]


class SimClock:
    """Logical clock; each posedge() calls its listeners in registration order."""

    def __init__(self) -> None:
        self.cycle: int = 0
        self._listeners: list[EdgeListener] = []

    def add_listener(self, fn: EdgeListener) -> None:
        self._listeners.append(fn)

    def posedge(self) -> int:
        self.cycle += 1
        for fn in self._listeners:
            fn()
        return self.cycle


@dataclass(frozen=True)
class CycleRecord:
    """What the orchestrator observed after one rising edge."""

    cycle: int
    vector: StimulusVector
    rd_data: int
    stored: int
    state: MemState

    def __str__(self) -> str:
        return (
            f"cycle={self.cycle} {self.state.name} vector={self.vector} "
            f"rd_data=0x{self.rd_data:02x} storage[addr]=0x{self.stored:02x}"
        )


class HarnessResults(BaseModel):
    """Summary of one harness run."""

    cycles: int
    seed: int | None
    vectors_generated: int
    vectors_applied: int
    checks: int
    passes: int
    errors: int
    coverage: dict[str, int]
    final_rd_data: int

    def __str__(self) -> str:
        """Return JSON-formatted string representation of the model."""
        return f"{self.__class__.__name__}:\n" + json.dumps(self.model_dump(), indent=2)

    def save(self, outdir: Path, name: str = "results") -> Path:
        """Save the results to <outdir>/<name>.json and return the path."""
        path = outdir / f"{name}.json"
        path.write_text(json.dumps(self.model_dump(), indent=2) + "\n")
        return path


class Orchestrator:  # pylint: disable=too-many-instance-attributes
    """Drive a generator/driver/model pipeline for a fixed number of cycles."""

    def __init__(  # pylint: disable=too-many-arguments, too-many-positional-arguments
        self,
        model: MemoryModel,
        generator: VectorGenerator,
        driver: Driver,
        bus: MemBus,
        clock: SimClock,
        scoreboard: Scoreboard | None = None,
        coverage: HarnessCoverage | None = None,
        cycles: int = 10,
    ) -> None:
        if cycles < 0:
            raise ValueError(f"cycles must be >= 0, got {cycles}")
        self.model = model
        self.generator = generator
        self.driver = driver
        self.bus = bus
        self.clock = clock
        self.scoreboard = scoreboard
        self.coverage = coverage
        self.cycles = cycles
        self.records: list[CycleRecord] = []

    def step(self) -> CycleRecord:
        """Run one full cycle and return what was observed."""
        self.generator.next()
        vector = self.driver.apply()
        cycle = self.clock.posedge()

        rd_data = self.bus.rd_data
        # Reset edges ignore addr, which may then be out of range
        stored = 0 if vector.reset else self.model.peek(vector.addr)
        record = CycleRecord(
            cycle=cycle,
            vector=vector,
            rd_data=rd_data,
            stored=stored,
            state=self.model.state,
        )
        self.records.append(record)
        logger.debug("%s", record)

        if self.coverage is not None:
            self.coverage.sample(vector)
        if self.scoreboard is not None:
            self.scoreboard.check(cycle, vector, rd_data, stored)
        return record

    def run(self) -> HarnessResults:
        """Run all cycles, then report."""
        logger.debug("begin run: cycles=%d", self.cycles)
        for _ in range(self.cycles):
            self.step()
        logger.debug("end run: cycles=%d", self.clock.cycle)

        if self.coverage is not None:
            self.coverage.report()
        if self.scoreboard is not None:
            self.scoreboard.report()
        return self.results()

    def results(self) -> HarnessResults:
        sb = self.scoreboard
        return HarnessResults(
            cycles=self.clock.cycle,
            seed=self.generator.seed,
            vectors_generated=self.generator.generated,
            vectors_applied=self.driver.applied,
            checks=sb.vect_cnt if sb else 0,
            passes=sb.pass_cnt if sb else 0,
            errors=sb.err_cnt if sb else 0,
            coverage=self.coverage.summary() if self.coverage else {},
            final_rd_data=self.bus.rd_data,
        )


def build_harness(config: HarnessModel | None = None) -> Orchestrator:
    """Construct every component once and wire them together."""
    config = config if config is not None else HarnessModel()
    logger.debug("begin build_harness:\n%s", config)

    channel = HandoffChannel(capacity=config.channel_capacity)
    bus = MemBus()
    model = MemoryModel()
    clock = SimClock()
    clock.add_listener(lambda: model.clock_edge(bus))

    constraints = StimulusConstraints(
        addr_mode=config.addr_mode,
        fixed_addr=config.fixed_addr,
        addr_min=config.addr_min,
        addr_max=config.addr_max,
    )
    generator = VectorGenerator(
        channel, constraints, count=config.cycles, seed=config.seed
    )
    driver = Driver(channel, bus)
    scoreboard = (
        Scoreboard(config.fail_on_error, config.error_quit_count)
        if config.check_en
        else None
    )
    coverage = HarnessCoverage() if config.coverage_en else None

    logger.debug("end build_harness")
    return Orchestrator(
        model,
        generator,
        driver,
        bus,
        clock,
        scoreboard=scoreboard,
        coverage=coverage,
        cycles=config.cycles,
    )
