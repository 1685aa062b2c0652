# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncmem/rad/rad_sync_mem/dv/rad_sync_mem_coverage.py


"""Coverage."""

from __future__ import annotations

import os

import pyuvm
from cocotb_coverage.coverage import CoverCross, CoverPoint, coverage_db

from syncmem.harness import MEM_DEPTH

from . import utils_dv
from .rad_sync_mem_item import RadSyncMemItem


class RadSyncMemCoverage(pyuvm.uvm_subscriber):
    """Functional coverage of the operation mix, address and read data.

    Set COV_YAML to export the coverage database at the end of the run.
    """

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        utils_dv.configure_component_logger(self)
        self.yaml_path: str | None = os.getenv("COV_YAML")
        self._coverage_en: bool = True
        self.total: int = 0

    def end_of_elaboration_phase(self) -> None:
        self.logger.debug("end_of_elaboration_phase begin")
        super().end_of_elaboration_phase()
        cvrg = utils_dv.uvm_config_db_get_try(self, "coverage_en")
        if isinstance(cvrg, bool):
            self._coverage_en = cvrg
        self.logger.debug("end_of_elaboration_phase end")

    def write(self, tt: RadSyncMemItem) -> None:
        if not self._coverage_en:
            return
        self.total += 1
        self.sample(tt)

    @CoverPoint("rad_sync_mem.reset", xf=lambda _self, tr: tr.reset, bins=[0, 1])
    @CoverPoint("rad_sync_mem.wr_en", xf=lambda _self, tr: tr.wr_en, bins=[0, 1])
    @CoverPoint("rad_sync_mem.rd_en", xf=lambda _self, tr: tr.rd_en, bins=[0, 1])
    @CoverPoint(
        "rad_sync_mem.addr", xf=lambda _self, tr: tr.addr, bins=list(range(MEM_DEPTH))
    )
    @CoverPoint(
        "rad_sync_mem.rd_data_zero",
        xf=lambda _self, tr: tr.rd_data == 0,
        bins=[True, False],
    )
    @CoverCross(
        "rad_sync_mem.wr_x_rd",
        items=["rad_sync_mem.wr_en", "rad_sync_mem.rd_en"],
    )
    def sample(self, tt: RadSyncMemItem) -> None:
        """Sampled by the decorators."""

    def report_phase(self) -> None:
        self.logger.debug("report_phase begin")
        super().report_phase()
        if not self._coverage_en:
            return
        self.logger.info(
            "RadSyncMemCoverage summary: total=%d wr_x_rd=%.1f%%",
            self.total,
            coverage_db["rad_sync_mem.wr_x_rd"].cover_percentage,
        )
        coverage_db.report_coverage(self.logger.debug)
        if self.yaml_path:
            coverage_db.export_to_yaml(self.yaml_path)
            self.logger.debug("Coverage YAML written to %s", self.yaml_path)
        self.logger.debug("report_phase end")
