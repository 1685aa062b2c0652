# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: tests/test_generator.py

from __future__ import annotations

import random

import pytest

from syncmem.harness import (
    ConstraintViolation,
    GeneratorExhausted,
    HandoffChannel,
    StimulusConstraints,
    VectorGenerator,
)


def test_produces_exactly_count(channel: HandoffChannel) -> None:
    gen = VectorGenerator(channel, count=10, seed=1)
    out = [gen.next() for _ in range(10)]
    assert gen.generated == 10
    assert gen.remaining == 0
    assert len(channel) == 10
    # Published in generation order
    assert [channel.get() for _ in range(10)] == out
    with pytest.raises(GeneratorExhausted):
        gen.next()
    assert channel.empty()


def test_default_count_is_ten(channel: HandoffChannel) -> None:
    assert len(list(VectorGenerator(channel))) == 10


def test_zero_count_is_immediately_exhausted(channel: HandoffChannel) -> None:
    gen = VectorGenerator(channel, count=0)
    assert list(gen) == []
    with pytest.raises(GeneratorExhausted):
        gen.next()


def test_negative_count_rejected(channel: HandoffChannel) -> None:
    with pytest.raises(ValueError):
        VectorGenerator(channel, count=-1)


def test_every_vector_is_legal(channel: HandoffChannel) -> None:
    for v in VectorGenerator(channel, count=200, seed=99):
        assert v.addr == 111
        assert not v.reset or (not v.wr_en and not v.rd_en)


def test_same_seed_same_sequence() -> None:
    a = list(VectorGenerator(HandoffChannel(), count=25, seed=1234))
    b = list(VectorGenerator(HandoffChannel(), count=25, seed=1234))
    assert a == b


def test_range_constraints_are_used(channel: HandoffChannel) -> None:
    c = StimulusConstraints(addr_mode="range", addr_min=0, addr_max=3)
    for v in VectorGenerator(channel, c, count=50, seed=5):
        assert 0 <= v.addr <= 3


def test_constraint_violation_propagates(channel: HandoffChannel) -> None:
    class Broken(StimulusConstraints):
        def randomize_vector(self, *constraints):
            v = super().randomize_vector(*constraints)
            return v.model_copy(update={"addr": 0})

    gen = VectorGenerator(channel, Broken(), count=3)
    with pytest.raises(ConstraintViolation):
        gen.next()
    # Nothing illegal reached the channel
    assert channel.empty()
    assert gen.generated == 0


def test_seeded_sequence_ignores_interleaving() -> None:
    alone = list(VectorGenerator(HandoffChannel(), count=20, seed=77))

    a = VectorGenerator(HandoffChannel(), count=20, seed=77)
    b = VectorGenerator(HandoffChannel(), count=20, seed=78)
    mixed = []
    for _ in range(20):
        mixed.append(a.next())
        b.next()
        random.random()
    assert mixed == alone


def test_seeded_generator_leaves_shared_stream_alone() -> None:
    random.seed(5)
    expected = [random.random() for _ in range(3)]

    random.seed(5)
    gen = VectorGenerator(HandoffChannel(), count=10, seed=1)
    got = []
    for _ in range(3):
        gen.next()
        got.append(random.random())
    assert got == expected
