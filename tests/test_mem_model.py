# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: tests/test_mem_model.py

from __future__ import annotations

import pytest

from syncmem.harness import MEM_DEPTH, MemBus, MemoryModel, MemState, OutOfRangeAddress


def test_powers_up_zero(mem: MemoryModel) -> None:
    assert len(mem) == MEM_DEPTH == 128
    assert mem.snapshot() == [0] * 128
    assert mem.output_register == 0
    assert mem.ticks == 0


def test_reset_clears_storage_and_output(mem: MemoryModel) -> None:
    for a in (0, 5, 111, 127):
        mem.tick(False, True, False, 0xA0 + a % 16, a)
    mem.tick(False, False, True, 0, 5)
    assert mem.output_register != 0

    assert mem.tick(True, True, True, 0xFF, 111) == 0
    assert mem.snapshot() == [0] * 128
    assert mem.output_register == 0
    assert mem.state is MemState.RESET


def test_reset_ignores_write_inputs(mem: MemoryModel) -> None:
    mem.tick(True, True, False, 0x77, 3)
    assert mem.peek(3) == 0


def test_reset_does_not_check_addr(mem: MemoryModel) -> None:
    assert mem.tick(True, False, False, 0, 999) == 0


def test_same_cycle_write_read_returns_old_value(mem: MemoryModel) -> None:
    mem.tick(False, True, False, 0x11, 111)
    assert mem.tick(False, True, True, 0x22, 111) == 0x11
    assert mem.peek(111) == 0x22


def test_write_then_later_read(mem: MemoryModel) -> None:
    assert mem.tick(False, True, False, 0x5A, 111) == 0
    assert mem.peek(111) == 0x5A
    assert mem.tick(False, False, True, 0, 111) == 0x5A
    assert mem.state is MemState.NORMAL


def test_write_persists_until_overwritten(mem: MemoryModel) -> None:
    mem.tick(False, True, False, 0x3C, 7)
    for _ in range(5):
        mem.tick(False, False, False, 0xFF, 7)
    assert mem.peek(7) == 0x3C
    mem.tick(False, True, False, 0xC3, 7)
    assert mem.peek(7) == 0xC3


def test_idle_cycle_holds_output(mem: MemoryModel) -> None:
    mem.tick(False, True, False, 0x42, 9)
    mem.tick(False, False, True, 0, 9)
    assert mem.output_register == 0x42
    assert mem.tick(False, False, False, 0, 9) == 0x42
    # A write without a read also leaves the output alone
    assert mem.tick(False, True, False, 0x99, 9) == 0x42
    # as does an idle edge at an address holding a different value
    mem.tick(False, True, False, 0x17, 20)
    assert mem.tick(False, False, False, 0, 20) == 0x42
    assert mem.peek(20) == 0x17


def test_write_data_is_masked_to_a_byte(mem: MemoryModel) -> None:
    mem.tick(False, True, False, 0x1AB, 0)
    assert mem.peek(0) == 0xAB


@pytest.mark.parametrize("addr", [-1, 128, 1000])
def test_out_of_range_addr_raises_without_side_effects(
    mem: MemoryModel, addr: int
) -> None:
    mem.tick(False, True, False, 0x10, 0)
    before = mem.snapshot()
    ticks = mem.ticks
    with pytest.raises(OutOfRangeAddress):
        mem.tick(False, True, True, 0xEE, addr)
    assert mem.snapshot() == before
    assert mem.ticks == ticks
    assert mem.output_register == 0
    with pytest.raises(IndexError):
        mem.peek(addr)


def test_clock_edge_samples_bus(mem: MemoryModel, bus: MemBus) -> None:
    bus.wr_en, bus.wr_data, bus.addr = True, 0x5A, 111
    assert mem.clock_edge(bus) == 0
    bus.wr_en, bus.rd_en = False, True
    assert mem.clock_edge(bus) == 0x5A
    assert bus.rd_data == 0x5A
    assert mem.ticks == 2
