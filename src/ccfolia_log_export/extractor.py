# Copyright (C) 2025 Torsten Knodt and contributors
# GNU General Public License
# SPDX-License-Identifier: GPL-3.0-or-later
"""Best-effort field extraction from a single candidate message element."""

from __future__ import annotations

import logging
import re

from bs4 import Tag

from .models import Message
from .selector import TIME_PATTERN
from .timestamps import normalize_timestamp

LOGGER = logging.getLogger(__name__)

DATE_PATTERN = re.compile(r"\d{4}[/\-.]\d{1,2}[/\-.]\d{1,2}")
_SPACE_BEFORE_NEWLINE = re.compile(r"\s+\n")

MAX_NAME_LENGTH = 30


def _avatar_of(element: Tag) -> str:
    img = element.find("img")
    if not isinstance(img, Tag):
        return ""
    src = img.get("src")
    if isinstance(src, list):
        src = " ".join(src)
    return src or ""


def _first_match(pattern: re.Pattern[str], text: str) -> str:
    match = pattern.search(text)
    return match.group(0) if match else ""


def split_speaker(text: str) -> tuple[str, str]:
    """Split raw message text into ``(name, body)``.

    The first non-empty line, with any time stamp removed, is taken as the
    speaker when it is 1-30 characters long and at least one more line
    follows. A first line holding nothing but the time is skipped first.
    Otherwise the whole text is the body and the name is empty.
    """
    lines = [line.strip() for line in text.split("\n")]
    lines = [line for line in lines if line]

    if len(lines) >= 2 and not TIME_PATTERN.sub("", lines[0], count=1).strip():
        lines = lines[1:]

    if len(lines) >= 2:
        head = TIME_PATTERN.sub("", lines[0], count=1).strip()
        if head and len(head) <= MAX_NAME_LENGTH:
            return head, "\n".join(lines[1:])

    return "", text


def extract_message(element: Tag) -> Message | None:
    """Extract a :class:`Message` from ``element``; ``None`` if it has no text."""
    avatar = _avatar_of(element)

    text = _SPACE_BEFORE_NEWLINE.sub("\n", element.get_text()).strip()
    if not text:
        LOGGER.debug("Skipping <%s> element without text", element.name)
        return None

    time = _first_match(TIME_PATTERN, text)
    date = _first_match(DATE_PATTERN, text)
    name, body = split_speaker(text)

    timestamp = normalize_timestamp(date, time) if date and time else None

    return Message(
        body=body,
        name=name,
        avatar=avatar,
        date=date,
        time=time,
        timestamp=timestamp,
    )
