# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncmem/rad/rad_sync_mem/dv/rad_sync_mem_sb.py

"""Scoreboard for rad_sync_mem.

Architecture:
    driver.ap (actual item) -> write() -> ref_model.calc_exp() -> compare_out

The driver publishes each item after sampling rd_data, so expected and
actual are always available together and no analysis FIFOs are needed.

Configuration (via config_db):
    sb_fail_on_error (bool): raise in final_phase if errors occurred (default True)
    sb_error_quit_count (int): raise after this many errors (default 1, 0 disables)
"""

from __future__ import annotations

import pyuvm

from syncmem.utils import green, red

from . import utils_dv
from .rad_sync_mem_item import RadSyncMemItem
from .rad_sync_mem_ref_model import RadSyncMemRefModel


class RadSyncMemSb(pyuvm.uvm_subscriber):
    """Compare DUT rd_data against the reference model, edge by edge."""

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        utils_dv.configure_component_logger(self)
        self.ref_model = RadSyncMemRefModel()
        self.vect_cnt: int = 0
        self.pass_cnt: int = 0
        self.err_cnt: int = 0
        self.fail_on_error: bool = True
        self.error_quit_count: int = 1

    def end_of_elaboration_phase(self) -> None:
        self.logger.debug("end_of_elaboration_phase begin")
        super().end_of_elaboration_phase()
        f = utils_dv.uvm_config_db_get_try(self, "sb_fail_on_error")
        if isinstance(f, bool):
            self.fail_on_error = f
        q = utils_dv.uvm_config_db_get_try(self, "sb_error_quit_count")
        if isinstance(q, int) and q >= 0:
            self.error_quit_count = q
        self.logger.debug("end_of_elaboration_phase end")

    def write(self, tt: RadSyncMemItem) -> None:
        exp = self.ref_model.calc_exp(tt)
        self.vect_cnt += 1
        if tt.compare_out(exp):
            self.pass_cnt += 1
            self.logger.debug("PASS exp=%s act=%s vect_cnt=%d", exp, tt, self.vect_cnt)
        else:
            self.err_cnt += 1
            self.logger.error("MISMATCH exp=%s act=%s", exp, tt)
        if (
            self.fail_on_error
            and self.error_quit_count
            and self.err_cnt >= self.error_quit_count
        ):
            raise AssertionError(
                f"Scoreboard error_quit_count exceeded "
                f"(errors={self.err_cnt}, threshold={self.error_quit_count})"
            )

    def report_phase(self) -> None:
        self.logger.debug("report_phase begin")
        if self.vect_cnt and self.err_cnt == 0:
            self.logger.info(
                green("*** TEST PASSED - %d ran, %d passed ***"),
                self.vect_cnt,
                self.pass_cnt,
            )
        else:
            self.logger.error(
                red("*** TEST FAILED - %d ran, %d passed, %d failed ***"),
                self.vect_cnt,
                self.pass_cnt,
                self.err_cnt,
            )
        self.logger.debug("report_phase end")

    def final_phase(self) -> None:
        self.logger.debug("final_phase begin")
        if self.fail_on_error and self.err_cnt > 0:
            raise AssertionError(
                f"Scoreboard saw {self.err_cnt} error(s); sb_fail_on_error is enabled"
            )
        self.logger.debug("final_phase end")
