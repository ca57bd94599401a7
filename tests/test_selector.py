# Copyright (C) 2025 Torsten Knodt and contributors
# GNU General Public License
# SPDX-License-Identifier: GPL-3.0-or-later
"""Tests for candidate node selection."""

import logging

from ccfolia_log_export.selector import MAX_FALLBACK_TEXT, select_candidates


def test_largest_selector_result_wins(soup_of) -> None:
    """The selector matching the most elements is used."""
    soup = soup_of(
        '<div class="chat-log">'
        '<div class="message">one</div><div class="message">two</div>'
        "</div>"
        '<ul><li class="message">three</li></ul>'
    )
    found = select_candidates(soup)
    assert [el.get_text() for el in found] == ["one", "two", "three"]


def test_first_selector_wins_ties(soup_of, caplog) -> None:
    """When counts tie, the earlier, more specific selector is kept."""
    caplog.set_level(logging.INFO, logger="ccfolia_log_export.selector")
    soup = soup_of('<div class="chat-log"><div class="message">a</div><div class="message">b</div></div>')

    found = select_candidates(soup)

    assert len(found) == 2
    assert "Using selector '.chat-log .message'" in caplog.text


def test_content_fallback(soup_of) -> None:
    """Without structural matches, short blocks containing a time are kept."""
    long_text = "x" * MAX_FALLBACK_TEXT
    soup = soup_of(
        '<div id="a">10:15 Bob hi</div>'
        '<div id="b">no time here</div>'
        f'<article id="c">{long_text} 11:00</article>'
    )
    found = select_candidates(soup)
    assert [el.get("id") for el in found] == ["a"]


def test_content_fallback_keeps_document_order(soup_of) -> None:
    """Nested matches come back outermost first, as in the document."""
    soup = soup_of('<div id="wrap"><ul><li id="inner">09:00 Alice</li></ul></div><div id="next">09:05 Bob</div>')
    found = select_candidates(soup)
    assert [el.get("id") for el in found] == ["wrap", "inner", "next"]


def test_nothing_found(soup_of) -> None:
    """A document without messages yields an empty list."""
    assert select_candidates(soup_of("<p>hello</p>")) == []
