# Copyright (C) 2025 Torsten Knodt and contributors
# GNU General Public License
# SPDX-License-Identifier: GPL-3.0-or-later
"""Turn loosely formatted date and time labels into sortable instants."""

from __future__ import annotations

import logging
import re
from datetime import datetime

LOGGER = logging.getLogger(__name__)

_DATE_SEPARATORS = re.compile(r"[/.]")
_ISO_LIKE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})T(\d{1,2}):(\d{2}):(\d{2})$")


def normalize_timestamp(date_text: str, time_text: str) -> float | None:
    """Return a numeric instant for ``date_text`` + ``time_text`` or ``None``.

    Dates may use ``/``, ``-`` or ``.`` as separators; all are canonicalized to
    ``-`` before composing ``{date}T{time}:00``. Anything that does not parse
    to a valid calendar value yields ``None`` instead of raising.
    """
    if not date_text or not time_text:
        return None

    iso = f"{_DATE_SEPARATORS.sub('-', date_text.strip())}T{time_text.strip()}:00"
    match = _ISO_LIKE.match(iso)
    if not match:
        LOGGER.debug("Unparseable timestamp '%s'", iso)
        return None

    try:
        moment = datetime(*(int(part) for part in match.groups()))
        return moment.timestamp()
    except (ValueError, OverflowError, OSError) as exc:
        LOGGER.debug("Invalid timestamp '%s': %s", iso, exc)
        return None
