# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncmem/utils_cli.py

"""Settings resolution for the harness and the bench.

This module reads configuration from environment variables and plusargs,
following the standard UVM command-line processor pattern. It has no
simulator dependency, so the pure-Python harness and the cocotb bench share
the same lookup rules.

Configuration Precedence:
    1. Environment variables (NAME or SYNCMEM_NAME)
    2. Plusargs (+NAME or +NAME=value)
    3. Default values

Functions:
    get_bool_setting: Resolve boolean configuration
    get_str_setting: Resolve string configuration
    get_int_setting: Resolve integer configuration (supports hex with 0x)
    get_opt_int_setting: Resolve an integer, or None when unset
    iter_plusargs: Iterate over all plusargs

Plusargs Format:
    Boolean flags: +NAME (treated as True) or +NAME=1/0/true/false/yes/no
    String values: +NAME=value
    Integer values: +NAME=123 or +NAME=0x7B (hex supported)

Environment Variables:
    PLUSARGS, COCOTB_PLUSARGS, or SYNCMEM_PLUSARGS: Space-separated plusargs
    Individual settings: NAME or SYNCMEM_NAME (e.g., RAD_SYNC_MEM_SEQ_LEN=50)

Example:
    >>> cycles = get_int_setting("SYNCMEM_CYCLES", 10)
    >>> check = get_bool_setting("CHECK_EN", True)
"""

from __future__ import annotations

import os
from typing import Iterable

_TRUE_SET = {"1", "true", "yes", "y", "on"}
_FALSE_SET = {"0", "false", "no", "n", "off"}

_PLUSARG_VARS = ("PLUSARGS", "COCOTB_PLUSARGS", "SYNCMEM_PLUSARGS")


def _parse_bool(s: str) -> bool | None:
    """Convert str to bool."""
    v = s.strip().lower()
    if v in _TRUE_SET:
        return True
    if v in _FALSE_SET:
        return False
    return None


def _env_keys(name: str) -> tuple[str, ...]:
    if name.startswith("SYNCMEM_"):
        return (name,)
    return (name, f"SYNCMEM_{name}")


def iter_plusargs() -> Iterable[str]:
    """Yield +args from the first non-empty plusargs env var."""
    for var in _PLUSARG_VARS:
        s = os.environ.get(var, "")
        if s:
            return s.split()
    return []


def _get_plusarg(name: str) -> str | None:
    """Return the value of +NAME or +NAME=val if present; else None.
    - If found as '+NAME=val', returns 'val'
    - If found as bare '+NAME', returns '1' (treat like a true/enable flag)
    """
    prefix = f"+{name}="
    for tok in iter_plusargs():
        if tok.startswith(prefix):
            return tok[len(prefix) :]
        if tok == f"+{name}":
            return "1"
    return None


def get_bool_setting(name: str, default: bool) -> bool:
    """
    Resolve a boolean setting with precedence: env > plusarg > default.
    bare +NAME is treated as True
    """
    for key in _env_keys(name):
        v = os.environ.get(key)
        if v is not None:
            parsed = _parse_bool(v)
            if parsed is not None:
                return parsed
    v = _get_plusarg(name)
    if v is not None:
        parsed = _parse_bool(v)
        if parsed is not None:
            return parsed
    return default


def get_str_setting(name: str, default: str) -> str:
    """Resolve a string setting: env > plusarg > default (always returns str)."""
    for key in _env_keys(name):
        v = os.environ.get(key)
        if v is not None:
            return v
    v = _get_plusarg(name)
    return v if v is not None else default


def get_opt_int_setting(name: str) -> int | None:
    """Resolve an int setting: env > plusarg, or None when neither parses."""
    for key in _env_keys(name):
        v = os.environ.get(key)
        if v is not None:
            try:
                return int(v, 0)  # supports 10/16 prefixes (e.g., "0x10")
            except ValueError:
                continue
    v = _get_plusarg(name)
    if v is not None:
        try:
            return int(v, 0)
        except ValueError:
            pass
    return None


def get_int_setting(name: str, default: int) -> int:
    """Resolve an int setting: env > plusarg > default (always returns int)."""
    v = get_opt_int_setting(name)
    return default if v is None else v
