from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from typing import Optional

from ..core.constants import ROSTER_IMPORT_MAX_CHARS

_HEADER_NAMES = {"name", "student", "student name", "full name"}


@dataclass(frozen=True)
class RosterEntry:
    name: str
    email: Optional[str] = None


def parse_roster(raw_text: str) -> list[RosterEntry]:
    """Parse pasted CSV/text (``name[,email]`` per line) into roster entries.

    Blank lines are skipped, a leading header row is ignored and input past
    the upload limit is dropped.
    """

    text = (raw_text or "")[:ROSTER_IMPORT_MAX_CHARS]
    entries: list[RosterEntry] = []

    reader = csv.reader(io.StringIO(text))
    for index, row in enumerate(reader):
        cells = [c.strip() for c in row]
        if not cells or not cells[0]:
            continue
        if index == 0 and cells[0].lower() in _HEADER_NAMES:
            continue

        email = cells[1] if len(cells) > 1 and "@" in cells[1] else None
        entries.append(RosterEntry(name=" ".join(cells[0].split()), email=email))

    return entries
