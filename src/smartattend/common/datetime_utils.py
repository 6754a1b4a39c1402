from __future__ import annotations

import re
import time
from datetime import date, datetime, timedelta, timezone

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def is_iso_date(value: object) -> bool:
    """True only for zero-padded YYYY-MM-DD strings naming a real day.

    String ordering of such values equals chronological ordering.
    """
    if not isinstance(value, str) or not _ISO_DATE_RE.match(value):
        return False
    try:
        parse_iso_date(value)
    except ValueError:
        return False
    return True


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()


def now_millis() -> int:
    return int(time.time() * 1000)


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def last_n_days(today: date, days: int) -> tuple[str, str]:
    start = today - timedelta(days=days)
    return start.strftime("%Y-%m-%d"), today.strftime("%Y-%m-%d")
