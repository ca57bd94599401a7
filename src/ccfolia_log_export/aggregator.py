# Copyright (C) 2025 Torsten Knodt and contributors
# GNU General Public License
# SPDX-License-Identifier: GPL-3.0-or-later
"""Merge parsed logs into channels and flatten the selected ones for rendering."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence

from .models import Channel, Message

LOGGER = logging.getLogger(__name__)

Tagged = tuple[Message, str]


def merge_channels(
    channels: dict[str, Channel], parsed: Mapping[str, Sequence[Message]]
) -> dict[str, Channel]:
    """Append ``parsed`` messages to ``channels``, creating missing channels.

    Existing content is never replaced or reordered. ``channels`` is updated
    in place and returned.
    """
    for name, messages in parsed.items():
        channel = channels.get(name)
        if channel is None:
            channel = channels[name] = Channel(name=name)
            LOGGER.debug("Created channel '%s'", name)
        channel.messages.extend(messages)
        LOGGER.debug("Channel '%s' += %d message(s) -> %d", name, len(messages), len(channel.messages))
    return channels


def flatten_channels(
    channels: Mapping[str, Channel],
    predicate: Callable[[Channel], bool] | None = None,
) -> list[Tagged]:
    """Return ``(message, channel_name)`` pairs of the selected channels.

    Defaults to the ``included`` flag as selection. The result is stably
    sorted by timestamp, missing timestamps counting as 0.
    """
    if predicate is None:
        predicate = _is_included

    selected: list[Tagged] = [
        (message, channel.name)
        for channel in channels.values()
        if predicate(channel)
        for message in channel.messages
    ]
    selected.sort(key=lambda pair: pair[0].sort_key)
    return selected


def _is_included(channel: Channel) -> bool:
    return channel.included


class ChannelStore:
    """Channels collected during one session, keyed by unique name."""

    def __init__(self) -> None:
        self.channels: dict[str, Channel] = {}

    def __len__(self) -> int:
        return len(self.channels)

    def __contains__(self, name: object) -> bool:
        return name in self.channels

    def __iter__(self) -> Iterator[Channel]:
        return iter(self.channels.values())

    def __getitem__(self, name: str) -> Channel:
        return self.channels[name]

    def merge(self, parsed: Mapping[str, Sequence[Message]]) -> None:
        merge_channels(self.channels, parsed)

    def sort_messages(self) -> None:
        """Stable-sort each channel's messages by timestamp."""
        for channel in self.channels.values():
            channel.messages.sort(key=lambda message: message.sort_key)

    def set_included(self, name: str, included: bool) -> None:
        self.channels[name].included = included

    def include_only(self, names: Iterable[str]) -> None:
        wanted = set(names)
        self._check_known(wanted)
        for channel in self.channels.values():
            channel.included = channel.name in wanted

    def exclude(self, names: Iterable[str]) -> None:
        unwanted = set(names)
        self._check_known(unwanted)
        for name in unwanted:
            self.channels[name].included = False

    def flatten(self, predicate: Callable[[Channel], bool] | None = None) -> list[Tagged]:
        return flatten_channels(self.channels, predicate)

    def summary(self) -> list[tuple[str, bool, int]]:
        """Return ``(name, included, message_count)`` per channel in creation order."""
        return [(c.name, c.included, len(c.messages)) for c in self.channels.values()]

    def _check_known(self, names: set[str]) -> None:
        unknown = sorted(names - self.channels.keys())
        if unknown:
            raise KeyError(f"Unknown channel(s): {', '.join(unknown)}")
