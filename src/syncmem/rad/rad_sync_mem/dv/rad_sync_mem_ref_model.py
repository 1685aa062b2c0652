# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncmem/rad/rad_sync_mem/dv/rad_sync_mem_ref_model.py

"""rad_sync_mem reference model.

The harness MemoryModel is the golden model: each item is one rising edge,
so calc_exp() ticks the model once with the item inputs and the expected
rd_data is the model's output register.
"""

from __future__ import annotations

import logging

import pyuvm

from syncmem.harness import MemoryModel

from .rad_sync_mem_item import RadSyncMemItem


class RadSyncMemRefModel(pyuvm.uvm_object):
    """Expected-output calculator backed by MemoryModel."""

    def __init__(self, name: str = "rad_sync_mem_ref_model") -> None:
        super().__init__(name)
        self._logger: logging.Logger = logging.getLogger(f"uvm.obj.{name}")
        self.model = MemoryModel(name)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def calc_exp(self, tr: RadSyncMemItem) -> RadSyncMemItem:
        """Return a copy of tr with the expected rd_data filled in."""
        exp = tr.clone()
        exp.rd_data = self.model.tick(tr.reset, tr.wr_en, tr.rd_en, tr.wr_data, tr.addr)
        self.logger.debug("calc_exp: %s state=%s", exp, self.model.state.name)
        return exp
