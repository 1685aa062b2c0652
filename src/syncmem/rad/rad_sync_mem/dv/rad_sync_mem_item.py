# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncmem/rad/rad_sync_mem/dv/rad_sync_mem_item.py

"""Sequence item for rad_sync_mem verification."""

from __future__ import annotations

import copy
import json
import logging
from typing import Self

import pyuvm

from syncmem.harness import StimulusVector

logger = logging.getLogger(__name__)


class RadSyncMemItem(pyuvm.uvm_sequence_item):
    """One clock edge of the memory.

    Inputs: reset, wr_en, rd_en, wr_data, addr
    Outputs: rd_data (checked)
    """

    IN_FIELDS: tuple[str, ...] = ("reset", "wr_en", "rd_en", "wr_data", "addr")
    OUT_FIELDS: tuple[str, ...] = ("rd_data",)

    def __init__(self, name: str = "rad_sync_mem_item") -> None:
        super().__init__(name)
        self.reset: int = 0
        self.wr_en: int = 0
        self.rd_en: int = 0
        self.wr_data: int = 0
        self.addr: int = 0
        self.rd_data: int | None = None

    def set_inputs(self, v: StimulusVector) -> None:
        """Copy the five inputs from a harness vector."""
        self.reset = int(v.reset)
        self.wr_en = int(v.wr_en)
        self.rd_en = int(v.rd_en)
        self.wr_data = v.wr_data
        self.addr = v.addr

    def clone(self) -> Self:
        return copy.deepcopy(self)

    def to_dict(self) -> dict[str, object]:
        return {f: getattr(self, f) for f in self.IN_FIELDS + self.OUT_FIELDS}

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True)

    def compare_out(self, other: RadSyncMemItem) -> bool:
        """self is ACTUAL (DUT), other is EXPECTED (reference model)."""
        if self.rd_data != other.rd_data:
            logger.error(
                "READ MISMATCH: exp.rd_data=%s act.rd_data=%s inputs=%s",
                other.rd_data,
                self.rd_data,
                json.dumps({f: getattr(self, f) for f in self.IN_FIELDS}),
            )
            return False
        return True
