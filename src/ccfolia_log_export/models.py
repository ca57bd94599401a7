# Copyright (C) 2025 Torsten Knodt and contributors
# GNU General Public License
# SPDX-License-Identifier: GPL-3.0-or-later
"""Message and channel records shared by the parser, aggregator and renderer."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_CHANNEL = "main"

ColorMap = dict[str, str]


@dataclass(frozen=True)
class Message:
    """One chat message extracted from a log export.

    ``timestamp`` is derived from ``date`` and ``time`` and is only used for
    ordering; ``None`` sorts as the earliest possible instant.
    """

    body: str
    name: str = ""
    avatar: str = ""
    date: str = ""
    time: str = ""
    timestamp: float | None = None

    @property
    def sort_key(self) -> float:
        return self.timestamp if self.timestamp is not None else 0


@dataclass
class Channel:
    """A named tab of the source room and the messages collected for it."""

    name: str
    included: bool = True
    messages: list[Message] = field(default_factory=list)
