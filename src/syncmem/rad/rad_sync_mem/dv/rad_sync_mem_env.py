# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncmem/rad/rad_sync_mem/dv/rad_sync_mem_env.py

"""Environment for rad_sync_mem."""

from __future__ import annotations

import pyuvm

from . import utils_dv
from .rad_sync_mem_coverage import RadSyncMemCoverage
from .rad_sync_mem_driver import RadSyncMemDriver
from .rad_sync_mem_sb import RadSyncMemSb


class RadSyncMemEnv(pyuvm.uvm_env):
    """Single-clock environment.

    Creates:
    - sqr: sequencer feeding the driver
    - drv: drives inputs, publishes completed items on drv.ap
    - sb: scoreboard (when check_en)
    - cov: coverage (when coverage_en)
    """

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        utils_dv.configure_component_logger(self)
        self.sqr: pyuvm.uvm_sequencer
        self.drv: RadSyncMemDriver
        self.sb: RadSyncMemSb | None = None
        self.cov: RadSyncMemCoverage | None = None

    def build_phase(self) -> None:
        self.logger.debug("build_phase begin")
        super().build_phase()
        self.sqr = pyuvm.uvm_sequencer("sqr", self)
        self.drv = RadSyncMemDriver("drv", self)
        if utils_dv.uvm_config_db_get_try(self, "check_en") is not False:
            self.sb = RadSyncMemSb("sb", self)
        if utils_dv.uvm_config_db_get_try(self, "coverage_en") is not False:
            self.cov = RadSyncMemCoverage("cov", self)
        self.logger.debug("build_phase end")

    def connect_phase(self) -> None:
        self.logger.debug("connect_phase begin")
        self.drv.seq_item_port.connect(self.sqr.seq_item_export)
        if self.sb is not None:
            self.drv.ap.connect(self.sb.analysis_export)
        if self.cov is not None:
            self.drv.ap.connect(self.cov.analysis_export)
        self.logger.debug("connect_phase end")
