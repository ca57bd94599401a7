# Copyright (C) 2025 Torsten Knodt and contributors
# GNU General Public License
# SPDX-License-Identifier: GPL-3.0-or-later
"""Convert CCFOLIA chat-log exports into inline-styled HTML for blog editors."""

__version__ = "0.1.0"
