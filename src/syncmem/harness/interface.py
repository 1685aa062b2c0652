# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncmem/harness/interface.py

"""Signal bundle shared by the driver and the memory model.

| Signal  | Direction | Width |
|---------|-----------|-------|
| reset   | in        | 1     |
| wr_en   | in        | 1     |
| rd_en   | in        | 1     |
| wr_data | in        | 8     |
| addr    | in        | 7     |
| rd_data | out       | 8     |

Only the Driver writes the inputs (drive()); only the MemoryModel writes
rd_data (MemoryModel.clock_edge()).
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass

from .stimulus import StimulusVector


@dataclass
class MemBus:  # pylint: disable=too-many-instance-attributes
    """Current levels of the memory ports."""

    reset: bool = False
    wr_en: bool = False
    rd_en: bool = False
    wr_data: int = 0
    addr: int = 0
    rd_data: int = 0

    def drive(self, vector: StimulusVector) -> None:
        """Place one vector on the input ports for the next edge."""
        self.reset = vector.reset
        self.wr_en = vector.wr_en
        self.rd_en = vector.rd_en
        self.wr_data = vector.wr_data
        self.addr = vector.addr

    def inputs(self) -> StimulusVector:
        """Return the input ports as a vector."""
        return StimulusVector(
            reset=self.reset,
            wr_en=self.wr_en,
            rd_en=self.rd_en,
            wr_data=self.wr_data,
            addr=self.addr,
        )

    def __str__(self) -> str:
        return json.dumps(asdict(self), sort_keys=True)
