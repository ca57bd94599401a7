# Copyright (C) 2025 Torsten Knodt and contributors
# GNU General Public License
# SPDX-License-Identifier: GPL-3.0-or-later
"""Tests for the CLI module."""

import pytest
from typer.testing import CliRunner

from ccfolia_log_export.cli import app

runner = CliRunner()


@pytest.fixture
def logs(tmp_path, make_log):
    """Two tabs of one session written as separate exports."""
    intro = tmp_path / "Session[Intro].html"
    side = tmp_path / "Session[Side].html"
    intro.write_text(make_log("Alice\n2024/01/05 09:00\nHello &lt;world&gt;"), encoding="utf-8")
    side.write_text(make_log("Bob\n2024/01/05 09:05\nSide talk"), encoding="utf-8")
    return intro, side


def test_version_command() -> None:
    """Test the version command."""
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "ccfolia-log-to-blog-html" in result.stdout


def test_help() -> None:
    """Test that help describes the tool."""
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "CCFOLIA" in result.stdout


def test_tabs_command(logs) -> None:
    """Tabs lists every channel with its message count."""
    result = runner.invoke(app, ["tabs", *map(str, logs)])
    assert result.exit_code == 0
    assert "Intro" in result.stdout
    assert "Side" in result.stdout


def test_render_to_stdout(logs) -> None:
    """Render prints the HTML snippet unchanged."""
    result = runner.invoke(app, ["render", *map(str, logs), "--color-map", '{"Alice": "#ff9900"}'])

    assert result.exit_code == 0
    assert "Hello &lt;world&gt;" in result.stdout
    assert "Side talk" in result.stdout
    assert "color:#ff9900;" in result.stdout
    assert result.stdout.index("Hello") < result.stdout.index("Side talk")


def test_render_to_file_with_selection(logs, tmp_path) -> None:
    """Excluded tabs are left out of the written file."""
    colors = tmp_path / "colors.json"
    colors.write_text('{"Bob": "#123456"}', encoding="utf-8")
    out = tmp_path / "out" / "post.html"

    result = runner.invoke(
        app,
        ["render", *map(str, logs), "--only", "Side", "--colors", str(colors), "-o", str(out)],
    )

    assert result.exit_code == 0
    html = out.read_text(encoding="utf-8")
    assert "Side talk" in html
    assert "Hello" not in html
    assert "color:#123456;" in html


def test_render_unknown_tab(logs) -> None:
    """Selecting a tab that was not loaded is a usage error."""
    result = runner.invoke(app, ["render", *map(str, logs), "--exclude", "Nope"])
    assert result.exit_code == 2


def test_no_loadable_files(tmp_path) -> None:
    """Exit non-zero when nothing could be read."""
    result = runner.invoke(app, ["render", str(tmp_path / "missing[Tab].html")])
    assert result.exit_code == 1


def test_invalid_log_level(logs) -> None:
    """An unknown log level is rejected."""
    result = runner.invoke(app, ["--log-level", "LOUD", "tabs", *map(str, logs)])
    assert result.exit_code == 1


def test_read_errors_stay_out_of_rendered_html(logs, tmp_path) -> None:
    """A missing input is reported on stderr while stdout holds only the HTML."""
    missing = tmp_path / "gone[Tab].html"

    result = runner.invoke(app, ["render", str(missing), *map(str, logs)])

    assert result.exit_code == 0
    assert result.stdout.startswith("<div")
    assert result.stdout.rstrip().endswith("</div>")
    assert "Error reading" not in result.stdout
    assert "gone[Tab].html" in result.stderr
