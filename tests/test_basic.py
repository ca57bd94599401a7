# Copyright (C) 2025 Torsten Knodt and contributors
# GNU General Public License
# SPDX-License-Identifier: GPL-3.0-or-later
"""Basic tests for the ccfolia_log_export package."""

from ccfolia_log_export import __version__


def test_version() -> None:
    """Test that version is defined."""
    assert __version__
    assert isinstance(__version__, str)


def test_import() -> None:
    """Test that the public modules import."""
    import ccfolia_log_export.cli  # noqa: F401
    import ccfolia_log_export.loader  # noqa: F401
