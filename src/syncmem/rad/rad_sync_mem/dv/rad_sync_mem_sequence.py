# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncmem/rad/rad_sync_mem/dv/rad_sync_mem_sequence.py

"""Constrained-random sequence for rad_sync_mem verification."""

from __future__ import annotations

import logging

import cocotb
import pyuvm

from syncmem import utils_cli
from syncmem.harness import HandoffChannel, StimulusConstraints, VectorGenerator

from . import utils_dv
from .rad_sync_mem_item import RadSyncMemItem


class RadSyncMemSequence(pyuvm.uvm_sequence):
    """Send VectorGenerator output to the driver, one item per clock edge.

    The bench uses the same constraint system as the Python harness, so
    every item obeys addr == 111 (or the configured range) and
    reset -> !wr_en && !rd_en.

    Settings (env > plusargs > default):
        RAD_SYNC_MEM_SEQ_LEN: number of items (default 10)
        RAD_SYNC_MEM_ADDR_MODE: fixed | range (default fixed)
    """

    def __init__(self, name: str = "rad_sync_mem_seq", seq_len: int = 10) -> None:
        super().__init__(name)
        self.logger: logging.Logger = logging.getLogger(f"uvm.{name}")
        utils_dv.configure_non_component_logger(self.logger)
        self.seq_len = utils_cli.get_int_setting("RAD_SYNC_MEM_SEQ_LEN", seq_len)
        self.addr_mode = utils_cli.get_str_setting("RAD_SYNC_MEM_ADDR_MODE", "fixed")

    async def body(self) -> None:
        self.logger.debug("body begin: length = %d", self.seq_len)
        channel = HandoffChannel(name=f"{self.get_name()}.channel")
        gen = VectorGenerator(
            channel,
            StimulusConstraints(addr_mode=self.addr_mode),  # type: ignore[arg-type]
            count=self.seq_len,
            seed=cocotb.RANDOM_SEED,
        )
        for i in range(self.seq_len):
            gen.next()
            item = RadSyncMemItem(f"tr{i}")
            await self.start_item(item)
            item.set_inputs(channel.get(block=False))
            await self.finish_item(item)
        self.logger.debug("body end")
