# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncmem/rad/tools/__init__.py

"""Command-line tools for the RAD benches."""
