# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncmem/harness/channel.py

"""Single-producer/single-consumer mailbox between generator and driver."""

from __future__ import annotations

import logging
import queue

from .stimulus import StimulusVector

logger = logging.getLogger(__name__)


class ChannelEmpty(RuntimeError):
    """get() found no vector (non-blocking, or the bounded wait expired)."""


class ChannelFull(RuntimeError):
    """put() found a bounded channel full (non-blocking, or the wait expired)."""


class HandoffChannel:
    """FIFO of StimulusVector built on queue.Queue.

    capacity=None is unbounded (mailbox semantics). With a bound, put()
    waits for space instead of dropping, so a concurrent producer and
    consumer keep strict FIFO order with no drops or duplicates.
    """

    def __init__(self, capacity: int | None = None, name: str = "channel") -> None:
        if capacity is not None and capacity <= 0:
            raise ValueError(f"capacity must be > 0, got {capacity}")
        self.name = name
        self.capacity = capacity
        self._q: queue.Queue[StimulusVector] = queue.Queue(maxsize=capacity or 0)
        self.put_count: int = 0
        self.get_count: int = 0

    def put(
        self,
        vector: StimulusVector,
        block: bool = True,
        timeout_s: float | None = None,
    ) -> None:
        """Enqueue one vector (waits for space on a full bounded channel)."""
        try:
            self._q.put(vector, block=block, timeout=timeout_s)
        except queue.Full as exc:
            raise ChannelFull(
                f"{self.name}: full (capacity={self.capacity}) after "
                f"{self.put_count} puts"
            ) from exc
        self.put_count += 1
        logger.debug("%s put #%d: %s", self.name, self.put_count, vector)

    def get(self, block: bool = True, timeout_s: float | None = None) -> StimulusVector:
        """Dequeue the oldest vector, waiting until one is available."""
        try:
            vector = self._q.get(block=block, timeout=timeout_s)
        except queue.Empty as exc:
            raise ChannelEmpty(
                f"{self.name}: empty after {self.get_count} gets"
            ) from exc
        self.get_count += 1
        logger.debug("%s get #%d: %s", self.name, self.get_count, vector)
        return vector

    def try_get(self) -> StimulusVector | None:
        """Non-blocking get; None when empty."""
        try:
            return self.get(block=False)
        except ChannelEmpty:
            return None

    def empty(self) -> bool:
        return self._q.empty()

    def __len__(self) -> int:
        return self._q.qsize()
