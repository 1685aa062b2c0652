# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncmem/rad/rad_sync_mem/dv/utils_dv.py

"""pyuvm config_db and cocotb signal helpers for the rad_sync_mem bench.

Functions:
    Config DB:
        uvm_config_db_get_try(): Get config value or None if missing
        uvm_config_db_get(): Get config value or raise ConfigKeyError
        uvm_config_db_set(): Set config value

    Signal Access:
        get_signal(): Get signal handle from DUT with validation
        get_signal_value_int(): Integer from Logic/LogicArray (None if X/Z)

    Logging:
        desired_log_level(): Log level from COCOTB_LOG_LEVEL
        configure_component_logger(): Set a component's level
        configure_non_component_logger(): Set a plain logger's level
"""

from __future__ import annotations

import logging
import os
from typing import Any, Union, cast

import pyuvm
from cocotb.handle import SimHandleBase
from cocotb.types import Logic, LogicArray
from pyuvm import ConfigDB, error_classes


class ConfigKeyError(KeyError):
    """Raised when a required key is missing from pyuvm's config_db."""


def desired_log_level(default: int = logging.INFO) -> int:
    """Return desired log level from env vars or default."""
    name = (os.getenv("COCOTB_LOG_LEVEL") or "INFO").upper()
    return getattr(logging, name, default)


def configure_component_logger(comp: pyuvm.uvm_component) -> None:
    comp.set_logging_level(desired_log_level())


def configure_non_component_logger(logger: logging.Logger) -> None:
    logger.setLevel(desired_log_level())
    # Bubble up to the cocotb handlers instead of adding our own
    logger.propagate = True


def uvm_config_db_get_try(comp: pyuvm.uvm_component, key: str) -> Any | None:
    """Return value or None if missing."""
    try:
        return cast(Any, ConfigDB().get(comp, "", key))
    except error_classes.UVMConfigItemNotFound:
        return None


def uvm_config_db_get(comp: pyuvm.uvm_component, key: str) -> object:
    """Like uvm_config_db_get_try but raises if key is missing."""
    val = uvm_config_db_get_try(comp, key)
    if val is not None:
        return val
    raise ConfigKeyError(
        f"config_db[{key!r}] missing for component '{comp.get_full_name()}'"
    )


def uvm_config_db_set(
    ctx: pyuvm.uvm_component | None, inst_name: str, key: str, value: Any
) -> None:
    ConfigDB().set(ctx, inst_name, key, value)


def get_signal(dut: Any, signal_name: str) -> SimHandleBase:
    """Return dut.<signal_name> or raise a clear error."""
    signal = getattr(dut, signal_name, None)
    if signal is None:
        raise RuntimeError(f"Signal '{signal_name}' not found on DUT")
    return cast(SimHandleBase, signal)


def get_signal_value_int(sig: Union[Logic, LogicArray]) -> int | None:
    """Return integer value if resolvable (no X/Z), else None."""
    if isinstance(sig, Logic):
        return int(sig) if sig.is_resolvable else None
    return sig.to_unsigned() if sig.is_resolvable else None
