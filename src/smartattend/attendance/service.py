from __future__ import annotations

import logging
import uuid
from typing import Mapping, Optional, Sequence

from ..batches.repository import BatchRepository
from ..common.datetime_utils import now_millis
from ..common.validators import require_iso_date, require_status
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..students.repository import StudentRepository
from .model import AttendanceRecord, MarkingRow
from .repository import AttendanceLedger

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(
        self,
        ledger: AttendanceLedger,
        students: StudentRepository,
        batches: BatchRepository,
        *,
        default_status: AttendanceStatus = AttendanceStatus.PRESENT,
    ):
        self._ledger = ledger
        self._students = students
        self._batches = batches
        self._default_status = default_status

    def submit_attendance(self, records: Sequence[AttendanceRecord]) -> None:
        """Validate then upsert records; an empty submission is a no-op.

        Every record must carry its student's current batch. Nothing is
        written when any record fails.
        """

        if not records:
            return

        roster = {s.id: s for s in self._students.list_all()}
        for r in records:
            require_iso_date(r.date)
            require_status(r.status)
            if not r.student_id:
                raise ValidationError("Attendance record without student")
            student = roster.get(r.student_id)
            if student is None:
                raise NotFoundError(f"Student {r.student_id} not found")
            if r.batch_id != student.batch_id:
                raise ValidationError(
                    f"Record for student {r.student_id} names batch {r.batch_id!r}, expected {student.batch_id!r}"
                )
        self._ledger.submit(records)

    def mark_batch(
        self,
        batch_id: str,
        date: str,
        statuses: Optional[Mapping[str, str]] = None,
        *,
        now: Optional[int] = None,
    ) -> list[AttendanceRecord]:
        """Record one status per roster student for ``date``.

        Students missing from ``statuses`` get the default status.
        """

        if not self._batches.get_by_id(batch_id):
            raise NotFoundError(f"Batch {batch_id} not found")
        require_iso_date(date)

        roster = self._students.list_for_batch(batch_id)
        statuses = dict(statuses or {})
        unknown = set(statuses) - {s.id for s in roster}
        if unknown:
            raise ValidationError(f"Students not in batch {batch_id}: {', '.join(sorted(unknown))}")

        timestamp = now if now is not None else now_millis()
        records = [
            AttendanceRecord(
                id=str(uuid.uuid4()),
                student_id=s.id,
                batch_id=batch_id,
                date=date,
                status=require_status(statuses.get(s.id, self._default_status)),
                timestamp=timestamp,
            )
            for s in roster
        ]
        self._ledger.submit(records)
        logger.info("Marked %d students of batch %s for %s", len(records), batch_id, date)
        return records

    def marking_sheet(self, batch_id: str, date: str) -> list[MarkingRow]:
        if not self._batches.get_by_id(batch_id):
            raise NotFoundError(f"Batch {batch_id} not found")
        require_iso_date(date)

        recorded = {r.student_id: r.status for r in self._ledger.list_for_batch(batch_id) if r.date == date}
        return [
            MarkingRow(
                student_id=s.id,
                name=s.name,
                photo_url=s.photo_url or "",
                status=recorded.get(s.id, self._default_status),
                recorded=s.id in recorded,
            )
            for s in self._students.list_for_batch(batch_id)
        ]

    def list_for_batch(self, batch_id: str) -> Sequence[AttendanceRecord]:
        return self._ledger.list_for_batch(batch_id)

    def list_all(self) -> Sequence[AttendanceRecord]:
        return self._ledger.list_all()


def record_from_payload(data: Mapping[str, object], *, now: Optional[int] = None) -> AttendanceRecord:
    """Build a record from a JSON payload, filling ``id``/``timestamp`` if absent."""

    student_id = data.get("studentId")
    if not student_id:
        raise ValidationError("studentId is required")
    raw_ts = data.get("timestamp")
    try:
        timestamp = int(raw_ts) if raw_ts else (now if now is not None else now_millis())  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid timestamp: {raw_ts!r}") from None
    return AttendanceRecord(
        id=str(data.get("id") or uuid.uuid4()),
        student_id=str(student_id),
        batch_id=str(data.get("batchId") or ""),
        date=require_iso_date(data.get("date")),
        status=require_status(data.get("status")),
        timestamp=timestamp,
    )
