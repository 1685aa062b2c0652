# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncmem/harness/mem_model.py

"""Cycle-based model of the 128 x 8-bit synchronous memory.

The model is evaluated once per rising clock edge via tick():

* Reset (level-sensitive, sampled on the edge):
  - Every storage entry and the output register are cleared.
  - wr_en, rd_en, wr_data and addr are ignored for that edge.

* Normal operation:
  - The entry at addr is captured *before* the write.
  - wr_en == 1 stores wr_data at addr.
  - rd_en == 1 loads the captured (pre-write) value into the output
    register. A same-cycle write and read at one address therefore
    returns the old value.
  - rd_en == 0 leaves the output register unchanged.

The address precondition is 0 <= addr < MEM_DEPTH. Instead of indexing out
of bounds the model raises OutOfRangeAddress and leaves its state untouched.
"""

from __future__ import annotations

import enum
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .interface import MemBus

logger = logging.getLogger(__name__)

ADDR_WIDTH = 7
DATA_WIDTH = 8
MEM_DEPTH = 1 << ADDR_WIDTH
DATA_MASK = (1 << DATA_WIDTH) - 1


class OutOfRangeAddress(IndexError):
    """Raised when an address outside [0, MEM_DEPTH) reaches the model."""


@enum.unique
class MemState(enum.Enum):
    """Per-edge evaluation state; nothing is latched across edges."""

    NORMAL = enum.auto()
    RESET = enum.auto()


class MemoryModel:
    """Clocked memory with a registered read port and synchronous reset."""

    def __init__(self, name: str = "mem_model") -> None:
        self.name = name
        self._storage: list[int] = [0] * MEM_DEPTH
        self._output_register: int = 0
        self._state: MemState = MemState.NORMAL
        self._ticks: int = 0

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------

    @property
    def output_register(self) -> int:
        """Registered read data (rd_data)."""
        return self._output_register

    @property
    def state(self) -> MemState:
        """State evaluated on the most recent edge."""
        return self._state

    @property
    def ticks(self) -> int:
        """Number of edges evaluated so far."""
        return self._ticks

    def peek(self, addr: int) -> int:
        """Return storage[addr] without side effects."""
        self._check_addr(addr)
        return self._storage[addr]

    def snapshot(self) -> list[int]:
        """Return a copy of the full storage array."""
        return list(self._storage)

    def __len__(self) -> int:
        return len(self._storage)

    # ------------------------------------------------------------------
    # Clocked update
    # ------------------------------------------------------------------

    def tick(  # pylint: disable=too-many-arguments, too-many-positional-arguments
        self,
        reset: bool | int,
        wr_en: bool | int,
        rd_en: bool | int,
        wr_data: int,
        addr: int,
    ) -> int:
        """Evaluate one rising edge and return the output register."""
        if reset:
            self._storage = [0] * MEM_DEPTH
            self._output_register = 0
            self._state = MemState.RESET
            self._ticks += 1
            logger.debug("%s tick %d: RESET", self.name, self._ticks)
            return self._output_register

        self._check_addr(addr)
        old = self._storage[addr]
        if wr_en:
            self._storage[addr] = wr_data & DATA_MASK
        if rd_en:
            self._output_register = old
        self._state = MemState.NORMAL
        self._ticks += 1
        logger.debug(
            "%s tick %d: wr_en=%d rd_en=%d addr=%d wr_data=0x%02x rd_data=0x%02x",
            self.name,
            self._ticks,
            int(bool(wr_en)),
            int(bool(rd_en)),
            addr,
            wr_data & DATA_MASK,
            self._output_register,
        )
        return self._output_register

    def clock_edge(self, bus: MemBus) -> int:
        """Sample the bus inputs on a rising edge and drive bus.rd_data."""
        rd_data = self.tick(bus.reset, bus.wr_en, bus.rd_en, bus.wr_data, bus.addr)
        bus.rd_data = rd_data
        return rd_data

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    @staticmethod
    def _check_addr(addr: int) -> None:
        if not 0 <= addr < MEM_DEPTH:
            raise OutOfRangeAddress(
                f"addr={addr} outside [0, {MEM_DEPTH - 1}] ({ADDR_WIDTH}-bit address)"
            )
