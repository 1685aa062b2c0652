# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: tests/conftest.py

"""Shared fixtures."""

from __future__ import annotations

import logging

import pytest

from syncmem.harness import HandoffChannel, MemBus, MemoryModel, StimulusVector

_SETTING_VARS = (
    "PLUSARGS",
    "COCOTB_PLUSARGS",
    "SYNCMEM_PLUSARGS",
    "SYNCMEM_CYCLES",
    "SYNCMEM_SEED",
)


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's env/plusargs out of every test."""
    for var in _SETTING_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def restore_root_logger():
    """configure_logger() replaces the root handlers; put them back."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def mem() -> MemoryModel:
    return MemoryModel()


@pytest.fixture
def bus() -> MemBus:
    return MemBus()


@pytest.fixture
def channel() -> HandoffChannel:
    return HandoffChannel()


def vec(**kw) -> StimulusVector:
    """StimulusVector at the focus address unless addr is given."""
    kw.setdefault("addr", 111)
    return StimulusVector(**kw)
