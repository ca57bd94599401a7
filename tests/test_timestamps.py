# Copyright (C) 2025 Torsten Knodt and contributors
# GNU General Public License
# SPDX-License-Identifier: GPL-3.0-or-later
"""Tests for timestamp normalization."""

import pytest

from ccfolia_log_export.timestamps import normalize_timestamp


def test_separators_are_equivalent() -> None:
    """Slash, dash and dot dates give the same instant."""
    slash = normalize_timestamp("2024/01/05", "09:30")
    assert slash is not None
    assert normalize_timestamp("2024-01-05", "09:30") == slash
    assert normalize_timestamp("2024.1.5", "9:30") == slash


def test_ordering() -> None:
    """Later wall-clock times give larger instants."""
    early = normalize_timestamp("2024-01-05", "09:30")
    late = normalize_timestamp("2024-01-05", "21:00")
    next_day = normalize_timestamp("2024-01-06", "00:01")
    assert early < late < next_day


@pytest.mark.parametrize(
    ("date", "time"),
    [
        ("2024-13-01", "09:00"),
        ("2024-02-30", "10:00"),
        ("2024-01-05", "25:00"),
        ("2024-01-05", "10:75"),
        ("2024/01-05x", "10:00"),
        ("", "10:00"),
        ("2024-01-05", ""),
    ],
)
def test_invalid_input_is_absent(date: str, time: str) -> None:
    """Malformed or impossible values yield None instead of raising."""
    assert normalize_timestamp(date, time) is None
