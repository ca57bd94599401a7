# Copyright (C) 2025 Torsten Knodt and contributors
# GNU General Public License
# SPDX-License-Identifier: GPL-3.0-or-later
"""Speaker name to color configuration, supplied as a JSON object."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .models import ColorMap

LOGGER = logging.getLogger(__name__)


def parse_color_map(text: str | None) -> ColorMap:
    """Parse ``{"Name": "#hex", ...}``; anything invalid yields ``{}``."""
    if not text or not text.strip():
        return {}

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        LOGGER.warning("Ignoring invalid color map JSON: %s", exc)
        return {}

    if not isinstance(data, dict):
        LOGGER.warning("Ignoring color map: expected a JSON object, got %s", type(data).__name__)
        return {}

    colors: ColorMap = {}
    for name, color in data.items():
        if not color or isinstance(color, (dict, list, bool)):
            LOGGER.debug("Dropping color map entry '%s' with unusable value %r", name, color)
            continue
        colors[name] = str(color)
    return colors


def load_color_map(path: Path) -> ColorMap:
    """Read a color map file; unreadable files yield ``{}``."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.warning("Could not read color map %s: %s", path, exc)
        return {}
    return parse_color_map(text)
