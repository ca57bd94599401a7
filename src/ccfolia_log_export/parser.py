# Copyright (C) 2025 Torsten Knodt and contributors
# GNU General Public License
# SPDX-License-Identifier: GPL-3.0-or-later
"""Parse one exported log document into channel-keyed message lists."""

from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup

from .extractor import extract_message
from .models import DEFAULT_CHANNEL, Message
from .selector import select_candidates

LOGGER = logging.getLogger(__name__)

# "Room[Tab].html" -> "Tab"
_CHANNEL_IN_FILENAME = re.compile(r"\[(.+?)\]\.html?$", re.IGNORECASE)
_LOG_FILENAME = re.compile(r"\.html?$", re.IGNORECASE)


def is_log_filename(filename: str) -> bool:
    """Return True for ``.htm``/``.html`` names (case-insensitive)."""
    return bool(_LOG_FILENAME.search(filename))


def channel_from_filename(filename: str) -> str:
    """Infer the channel (tab) name from an export filename."""
    match = _CHANNEL_IN_FILENAME.search(filename)
    name = match.group(1).strip() if match else ""
    return name or DEFAULT_CHANNEL


def parse_log(html_text: str, filename: str) -> dict[str, list[Message]]:
    """Extract every message of ``html_text`` into a single channel.

    The channel name comes from ``filename`` only; elements that do not look
    like messages are dropped without error.
    """
    channel = channel_from_filename(filename)
    LOGGER.debug("Parsing %s (%d chars) into channel '%s'", filename, len(html_text), channel)

    soup = BeautifulSoup(html_text, "lxml")
    candidates = select_candidates(soup)

    messages: list[Message] = []
    for element in candidates:
        message = extract_message(element)
        if message is not None:
            messages.append(message)

    rejected = len(candidates) - len(messages)
    if rejected:
        LOGGER.debug("%s: %d candidate(s) rejected as non-messages", filename, rejected)
    if not messages:
        LOGGER.warning("%s: no chat messages found", filename)
    else:
        LOGGER.info("%s: extracted %d message(s) into '%s'", filename, len(messages), channel)

    return {channel: messages}
