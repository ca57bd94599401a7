# Copyright (C) 2025 Torsten Knodt and contributors
# GNU General Public License
# SPDX-License-Identifier: GPL-3.0-or-later
"""Read a batch of log files and merge them into a :class:`ChannelStore`.

All reads of a batch are joined before any parsing starts, so a batch is
merged as a whole. A file that cannot be read only drops its own
contribution.
"""

from __future__ import annotations

import glob
import logging
import os
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path

from .aggregator import ChannelStore
from .parser import is_log_filename, parse_log

LOGGER = logging.getLogger(__name__)


@dataclass
class BatchResult:
    """Outcome of :func:`load_batch`."""

    loaded: list[Path] = field(default_factory=list)
    failures: dict[Path, str] = field(default_factory=dict)
    skipped: list[Path] = field(default_factory=list)
    message_count: int = 0


def expand_paths(inputs: Sequence[str | Path]) -> list[Path]:
    """Expand glob patterns and return deduplicated absolute paths in input order."""
    expanded: list[Path] = []
    for pattern in inputs:
        # export names contain "[Tab]", which glob would read as a character class
        if Path(pattern).exists():
            matches = [str(pattern)]
        else:
            # unmatched literals are kept so a missing file surfaces as a read failure
            matches = glob.glob(str(pattern)) or [str(pattern)]
        LOGGER.debug("Pattern '%s' matched %d path(s)", pattern, len(matches))
        # not resolved, so a symlinked export keeps its own "[Tab]" name
        expanded.extend(Path(m).absolute() for m in sorted(matches))

    seen: set[Path] = set()
    uniq: list[Path] = []
    for path in expanded:
        if path not in seen:
            uniq.append(path)
            seen.add(path)
        else:
            LOGGER.debug("Skipping duplicate path: %s", path)
    return uniq


def _read_text(path: Path) -> str:
    with path.open("r", encoding="utf-8", errors="replace") as f:
        return f.read()


def read_batch(paths: Sequence[Path], jobs: int = 0) -> tuple[dict[Path, str], dict[Path, str]]:
    """Read all ``paths`` concurrently and return ``(texts, failures)``.

    Returns only after every read has finished or failed.
    """
    texts: dict[Path, str] = {}
    failures: dict[Path, str] = {}
    if not paths:
        return texts, failures

    max_workers = max(1, jobs or min(len(paths), os.cpu_count() or 4))
    LOGGER.debug("Reading %d file(s) with %d worker(s)", len(paths), max_workers)

    with ThreadPoolExecutor(max_workers=max_workers) as ex:
        futs = {ex.submit(_read_text, path): path for path in paths}
        for fut in as_completed(futs):
            path = futs[fut]
            try:
                texts[path] = fut.result()
            except OSError as exc:
                failures[path] = str(exc)
                LOGGER.error("Could not read %s: %s", path, exc)

    return texts, failures


def load_batch(store: ChannelStore, inputs: Sequence[str | Path], jobs: int = 0) -> BatchResult:
    """Read, parse and merge one batch of log files into ``store``."""
    result = BatchResult()

    paths: list[Path] = []
    for path in expand_paths(inputs):
        if is_log_filename(path.name):
            paths.append(path)
        else:
            result.skipped.append(path)
            LOGGER.warning("Skipping %s: only .htm/.html log exports are supported", path)

    texts, result.failures = read_batch(paths, jobs)

    # merge in input order, independent of read completion order
    for path in paths:
        if path not in texts:
            continue
        parsed = parse_log(texts[path], path.name)
        store.merge(parsed)
        result.loaded.append(path)
        result.message_count += sum(len(messages) for messages in parsed.values())

    store.sort_messages()
    LOGGER.info(
        "Batch loaded: %d file(s), %d message(s), %d failure(s), %d skipped",
        len(result.loaded),
        result.message_count,
        len(result.failures),
        len(result.skipped),
    )
    return result
