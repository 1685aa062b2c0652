# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncmem/harness/generator.py

"""Finite constrained-random vector source."""

from __future__ import annotations

import logging
import random
from typing import Iterator

from .channel import HandoffChannel
from .stimulus import StimulusConstraints, StimulusVector

logger = logging.getLogger(__name__)

DEFAULT_COUNT = 10


class GeneratorExhausted(RuntimeError):
    """next() was called after the run's vectors were all produced."""


class VectorGenerator:
    """Produce exactly `count` legal vectors and publish each to the channel.

    A generator is single-use: once exhausted it stays exhausted, and a new
    run uses a new generator.

    The constraint solver draws from the module-level `random` generator and
    offers no per-instance hook. A seeded VectorGenerator therefore keeps its
    own `random` state and swaps it in only for the duration of each draw,
    so its sequence depends on the seed alone, whatever else uses `random`
    in between (another generator, cocotb), and the surrounding stream is
    left untouched. An unseeded generator draws from the shared stream.

    Example:
        >>> ch = HandoffChannel()
        >>> gen = VectorGenerator(ch, StimulusConstraints(), count=3, seed=1)
        >>> [v.addr for v in gen]
        [111, 111, 111]
        >>> len(ch)
        3
    """

    def __init__(
        self,
        channel: HandoffChannel,
        constraints: StimulusConstraints | None = None,
        count: int = DEFAULT_COUNT,
        seed: int | None = None,
    ) -> None:
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        self.channel = channel
        self.constraints = constraints if constraints is not None else StimulusConstraints()
        self.count = count
        self.seed = seed
        self.generated: int = 0
        self._rng_state: tuple | None = (
            random.Random(seed).getstate() if seed is not None else None
        )
        logger.debug(
            "VectorGenerator: count=%d seed=%s constraints=[%s]",
            count,
            seed,
            self.constraints.describe(),
        )

    @property
    def remaining(self) -> int:
        return self.count - self.generated

    def next(self) -> StimulusVector:
        """Randomize, verify, publish and return one vector."""
        if self.generated >= self.count:
            raise GeneratorExhausted(
                f"all {self.count} vectors of this run were already generated"
            )
        vector = self._draw()
        # A violation here is a solver/constraint defect; let it propagate.
        self.constraints.check(vector)
        self.channel.put(vector)
        self.generated += 1
        logger.debug("generated %d/%d: %s", self.generated, self.count, vector)
        return vector

    def _draw(self) -> StimulusVector:
        if self._rng_state is None:
            return self.constraints.randomize_vector()
        outer = random.getstate()
        random.setstate(self._rng_state)
        try:
            return self.constraints.randomize_vector()
        finally:
            self._rng_state = random.getstate()
            random.setstate(outer)

    def __iter__(self) -> Iterator[StimulusVector]:
        while self.remaining > 0:
            yield self.next()
