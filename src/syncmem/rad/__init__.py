# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncmem/rad/__init__.py

"""RAD (Reusable Analog/Digital) designs verified against the harness model.

Modules:
- rad_sync_mem: 128 x 8-bit synchronous memory with a registered read port

Subpackages:
- tools: the syncmem-dv bench runner

Each module contains:
- rtl/: SystemVerilog RTL implementation
- dv/: Design verification testbench (cocotb/pyuvm)
"""
