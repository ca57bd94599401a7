# Copyright (C) 2025 Torsten Knodt and contributors
# GNU General Public License
# SPDX-License-Identifier: GPL-3.0-or-later
"""Shared fixtures for the test suite."""

import pytest
from bs4 import BeautifulSoup


@pytest.fixture
def make_log():
    """Build a minimal log export with one ``.message`` div per entry."""
    def _make(*messages: str, wrapper: str = '<div class="chat-log">{}</div>') -> str:
        items = "".join(f'<div class="message">{m}</div>' for m in messages)
        return f"<html><body>{wrapper.format(items)}</body></html>"
    return _make


@pytest.fixture
def soup_of():
    """Parse an HTML string the same way the parser does."""
    def _parse(html: str) -> BeautifulSoup:
        return BeautifulSoup(html, "lxml")
    return _parse
