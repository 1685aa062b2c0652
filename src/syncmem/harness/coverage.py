# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncmem/harness/coverage.py

"""Coverage."""

from __future__ import annotations

import logging

from .stimulus import StimulusVector

logger = logging.getLogger(__name__)


class HarnessCoverage:  # pylint: disable=too-many-instance-attributes
    """Track operation mix and address spread of the applied vectors."""

    def __init__(self) -> None:
        self.total: int = 0
        self.resets: int = 0
        self.writes: int = 0
        self.reads: int = 0
        self.write_reads: int = 0
        self.idles: int = 0
        self.reset_ignored: int = 0
        self.addrs: set[int] = set()

    def sample(self, v: StimulusVector) -> None:
        self.total += 1
        if v.reset:
            self.resets += 1
            if v.wr_en or v.rd_en or v.wr_data or v.addr:
                self.reset_ignored += 1
            return
        # addr is only meaningful on non-reset edges
        self.addrs.add(v.addr)
        if v.wr_en:
            self.writes += 1
        if v.rd_en:
            self.reads += 1
        if v.wr_en and v.rd_en:
            self.write_reads += 1
        if not v.wr_en and not v.rd_en:
            self.idles += 1

    def summary(self) -> dict[str, int]:
        return {
            "total": self.total,
            "resets": self.resets,
            "writes": self.writes,
            "reads": self.reads,
            "write_reads": self.write_reads,
            "idles": self.idles,
            "reset_ignored": self.reset_ignored,
            "distinct_addrs": len(self.addrs),
        }

    def report(self) -> None:
        """Log coverage summary."""
        logger.info(
            "HarnessCoverage summary:"
            " total=%d resets=%d writes=%d reads=%d write_reads=%d idles=%d"
            " reset_ignored=%d"
            " distinct_addrs=%d",
            *self.summary().values(),
        )
