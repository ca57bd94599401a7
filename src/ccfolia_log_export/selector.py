# Copyright (C) 2025 Torsten Knodt and contributors
# GNU General Public License
# SPDX-License-Identifier: GPL-3.0-or-later
"""Pick the elements of a log document that most likely hold single messages.

The export DOM changes between versions of the tool, so several structural
selectors are tried and the one matching the most elements wins. New export
layouts only need a new entry in ``CANDIDATE_SELECTORS``.
"""

from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup, Tag

LOGGER = logging.getLogger(__name__)

CANDIDATE_SELECTORS: tuple[str, ...] = (
    "[data-testid='chat-log'] .message",
    ".chat-log .message",
    ".log .message",
    ".message",
    "article .message",
    "li.message",
)

# Broad containers scanned when no structural selector matches anything.
FALLBACK_SELECTOR = "li, div, article"
MAX_FALLBACK_TEXT = 2000

TIME_PATTERN = re.compile(r"\d{1,2}:\d{2}")


def _looks_like_message(element: Tag) -> bool:
    text = element.get_text().strip()
    return bool(TIME_PATTERN.search(text)) and len(text) < MAX_FALLBACK_TEXT


def select_candidates(soup: BeautifulSoup) -> list[Tag]:
    """Return candidate message elements in document order."""
    best: list[Tag] = []
    best_selector = None

    for selector in CANDIDATE_SELECTORS:
        found = soup.select(selector)
        LOGGER.debug("Selector '%s' matched %d elements", selector, len(found))
        if len(found) > len(best):
            best = list(found)
            best_selector = selector

    if best:
        LOGGER.info("Using selector '%s' (%d candidates)", best_selector, len(best))
        return best

    LOGGER.debug("No structural selector matched, scanning '%s' by content", FALLBACK_SELECTOR)
    best = [el for el in soup.select(FALLBACK_SELECTOR) if _looks_like_message(el)]
    LOGGER.info("Content-shape fallback found %d candidates", len(best))
    return best
