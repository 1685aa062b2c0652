# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncmem/harness/driver.py

"""Bus functional model: moves one vector per cycle onto the memory inputs."""

from __future__ import annotations

import logging

from .channel import HandoffChannel
from .interface import MemBus
from .stimulus import StimulusVector

logger = logging.getLogger(__name__)


class Driver:
    """Dequeue a vector and drive it onto the bus for the next rising edge.

    The driver is the only writer of the bus inputs. It never checks
    constraint legality; that belongs to the generator.
    """

    def __init__(
        self,
        channel: HandoffChannel,
        bus: MemBus,
        timeout_s: float | None = None,
    ) -> None:
        self.channel = channel
        self.bus = bus
        self.timeout_s = timeout_s
        self.applied: int = 0

    def apply(self) -> StimulusVector:
        """Block until a vector is available, then drive it."""
        vector = self.channel.get(timeout_s=self.timeout_s)
        self.bus.drive(vector)
        self.applied += 1
        logger.debug("drove #%d: %s", self.applied, vector)
        return vector
