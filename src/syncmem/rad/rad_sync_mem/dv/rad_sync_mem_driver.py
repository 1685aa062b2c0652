# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncmem/rad/rad_sync_mem/dv/rad_sync_mem_driver.py


"""Driver for rad_sync_mem: drive on negedge, sample on posedge."""

from __future__ import annotations

from typing import Any

import pyuvm
from cocotb.handle import SimHandleBase
from cocotb.triggers import NextTimeStep, ReadOnly, ReadWrite

from syncmem import utils_cli

from . import utils_dv
from .rad_sync_mem_item import RadSyncMemItem


class RadSyncMemDriver(pyuvm.uvm_driver):  # pylint: disable=too-many-ancestors
    """Drive one item per clock and publish it with the observed rd_data.

    Inputs change on the falling edge, half a period before the rising edge
    that samples them. After that rising edge the driver waits for ReadOnly,
    samples rd_data into the item and writes a copy to `ap`.

    The bench first holds reset for RESET_CYCLES edges so the DUT and the
    reference model start from the same all-zero state; those edges are
    not published.
    """

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        utils_dv.configure_component_logger(self)
        self.ap: pyuvm.uvm_analysis_port = pyuvm.uvm_analysis_port("ap", self)
        self.initial_dut_input_values: dict[str, int] = {
            "reset": 0,
            "wr_en": 0,
            "rd_en": 0,
            "wr_data": 0,
            "addr": 0,
        }
        self.clock_name: str = "clk"
        self.reset_cycles: int = utils_cli.get_int_setting("RESET_CYCLES", 1)
        self._dut: Any | None = None
        self._clk: SimHandleBase | None = None

    def end_of_elaboration_phase(self) -> None:
        self.logger.debug("end_of_elaboration_phase begin")
        super().end_of_elaboration_phase()
        v = utils_dv.uvm_config_db_get_try(self, "clock_name")
        if isinstance(v, str) and v:
            self.clock_name = v
        self._dut = utils_dv.uvm_config_db_get(self, "dut")
        self._clk = utils_dv.get_signal(self._dut, self.clock_name)
        self.logger.debug("end_of_elaboration_phase end")

    async def run_phase(self) -> None:
        self.logger.debug("run_phase begin")
        await self.apply_initial_dut_inputs()
        await self.apply_reset()
        while True:
            tr: RadSyncMemItem = await self.seq_item_port.get_next_item()
            await self.drive_item(self._dut, tr)
            self.ap.write(tr.clone())
            self.seq_item_port.item_done()

    async def apply_initial_dut_inputs(self) -> None:
        """Apply quiet inputs at time 0 and advance past the NBA region."""
        self.logger.debug("apply_initial_dut_inputs begin")
        for sig_name, val in self.initial_dut_input_values.items():
            utils_dv.get_signal(self._dut, sig_name).value = val
        await ReadWrite()
        await NextTimeStep()
        self.logger.debug("apply_initial_dut_inputs end")

    async def apply_reset(self) -> None:
        assert self._clk is not None, "apply_reset called before end_of_elaboration"
        self.logger.debug("apply_reset begin: cycles=%d", self.reset_cycles)
        if self.reset_cycles <= 0:
            return
        await self._clk.falling_edge
        self._dut.reset.value = 1
        for _ in range(self.reset_cycles):
            await self._clk.rising_edge
        await self._clk.falling_edge
        self._dut.reset.value = 0
        self.logger.debug("apply_reset end")

    async def drive_item(self, dut: Any, tr: RadSyncMemItem) -> None:
        """Drive the five inputs, then sample rd_data after the next posedge."""
        assert self._clk is not None, "drive_item called before end_of_elaboration"
        await self._clk.falling_edge
        dut.reset.value = tr.reset
        dut.wr_en.value = tr.wr_en
        dut.rd_en.value = tr.rd_en
        dut.wr_data.value = tr.wr_data
        dut.addr.value = tr.addr
        self.logger.debug("drove: %s", tr)

        await self._clk.rising_edge
        await ReadOnly()
        tr.rd_data = utils_dv.get_signal_value_int(dut.rd_data.value)
