from __future__ import annotations

import logging
import threading
from typing import Sequence

from ..core.enums import Collection
from ..storage.repository import RecordStore
from .model import AttendanceRecord

logger = logging.getLogger(__name__)


class AttendanceLedger:
    """Write path for attendance with one record per ``(student_id, date)``."""

    def __init__(self, store: RecordStore):
        self._store = store
        self._write_lock = threading.Lock()

    def list_all(self) -> Sequence[AttendanceRecord]:
        records = []
        for d in self._store.get(Collection.ATTENDANCE):
            try:
                records.append(AttendanceRecord.from_dict(d))
            except (KeyError, ValueError, TypeError):
                logger.warning("Skipping malformed attendance entry %r", d.get("id"))
        return records

    def list_for_batch(self, batch_id: str) -> Sequence[AttendanceRecord]:
        return [r for r in self.list_all() if r.batch_id == batch_id]

    def submit(self, records: Sequence[AttendanceRecord]) -> None:
        """Upsert by filter-then-append.

        Existing records sharing a key with any incoming record are dropped
        (keys are global across batches), then the incoming records are
        appended. Inside one submission the last record for a key wins.
        """

        if not records:
            return

        incoming: dict[tuple[str, str], AttendanceRecord] = {}
        for r in records:
            incoming.pop(r.key, None)
            incoming[r.key] = r

        with self._write_lock:
            existing = self._store.get(Collection.ATTENDANCE)
            kept = [d for d in existing if (d.get("studentId"), d.get("date")) not in incoming]
            kept.extend(r.to_dict() for r in incoming.values())
            self._store.put(Collection.ATTENDANCE, kept)
