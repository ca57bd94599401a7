# Copyright (C) 2025 Torsten Knodt and contributors
# GNU General Public License
# SPDX-License-Identifier: GPL-3.0-or-later
"""Render messages as self-contained inline-styled HTML for blog editors.

All styling is inline so the result survives pasting into a rich-text editor
that strips stylesheets. Message text comes from uploaded files and is always
escaped.
"""

from __future__ import annotations

import html
import logging
from collections.abc import Iterable, Mapping

from .models import Message

LOGGER = logging.getLogger(__name__)

DEFAULT_NAME_COLOR = "#cfcfcf"
FONT_STACK = "'Pretendard Variable',Pretendard,system-ui,-apple-system,'Segoe UI',sans-serif"

WRAPPER_OPEN = (
    '<div style="background:#1b1b1b;padding:18px 18px;border-radius:14px;">\n'
    f'  <div style="font-family:{FONT_STACK};">\n'
)
WRAPPER_CLOSE = "  </div>\n</div>"
SEPARATOR = '<div style="height:1px;background:#3a3a3a;margin:10px 0;"></div>'

AVATAR_STYLE = "width:28px;height:28px;border-radius:50%;object-fit:cover;flex:0 0 auto;"
NAME_STYLE = "font-weight:600;font-size:9pt;color:{color};"
TIME_STYLE = "font-weight:400;font-size:7pt;color:#9a9a9a;"
BODY_STYLE = (
    "margin-top:4px;font-weight:400;font-size:9pt;color:#cfcfcf;"
    "line-height:1.55;white-space:pre-wrap;word-break:break-word;"
)


def escape_html(value: object) -> str:
    """Escape the five HTML-special characters."""
    return html.escape(str(value), quote=True).replace("&#x27;", "&#039;")


def escape_attr(value: object) -> str:
    """Escape a value for a double-quoted attribute, backticks included."""
    return escape_html(value).replace("`", "&#096;")


def _avatar_html(avatar: str) -> str:
    if avatar:
        return f'<img src="{escape_attr(avatar)}" alt="" style="{AVATAR_STYLE}" />'
    return '<div style="width:28px;"></div>'


def render_message(message: Message, name: str, color: str) -> str:
    """Render one message block (header row and body)."""
    time_label = " ".join(part for part in (message.date, message.time) if part)
    time_html = (
        f'<span style="{TIME_STYLE}">{escape_html(time_label)}</span>' if time_label else ""
    )
    return (
        '<div style="padding:8px 2px;">'
        '<div style="display:flex;gap:10px;align-items:flex-start;">'
        f"{_avatar_html(message.avatar)}"
        '<div style="min-width:0;flex:1;">'
        '<div style="display:flex;gap:10px;align-items:baseline;flex-wrap:wrap;">'
        f'<span style="{escape_attr(NAME_STYLE.format(color=color))}">{escape_html(name)}</span>'
        f"{time_html}"
        "</div>"
        f'<div style="{BODY_STYLE}">{escape_html(message.body)}</div>'
        "</div>"
        "</div>"
        "</div>"
    )


def render_html(
    messages: Iterable[tuple[Message, str] | Message],
    color_map: Mapping[str, str] | None = None,
) -> str:
    """Render ``messages`` in the given order into one HTML string.

    ``messages`` holds ``(message, channel)`` pairs as produced by
    :func:`ccfolia_log_export.aggregator.flatten_channels`; bare messages are
    accepted too. A separator line precedes every message whose speaker
    differs from the previous one.
    """
    color_map = color_map or {}
    rows: list[str] = []
    previous: str | None = None
    count = 0

    for item in messages:
        message = item[0] if isinstance(item, tuple) else item
        name = (message.name or "").strip()
        color = color_map.get(name) if name else None

        if previous is not None and name != previous:
            rows.append(SEPARATOR)
        previous = name

        rows.append(render_message(message, name, color or DEFAULT_NAME_COLOR))
        count += 1

    LOGGER.debug("Rendered %d message block(s)", count)
    body = "\n".join(rows)
    return WRAPPER_OPEN + (body + "\n" if body else "") + WRAPPER_CLOSE
