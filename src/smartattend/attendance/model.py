from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """One student's status for one calendar date.

    ``date`` is a zero-padded YYYY-MM-DD string; ``timestamp`` is epoch
    milliseconds of the write.
    """

    id: str
    student_id: str
    batch_id: str
    date: str
    status: AttendanceStatus
    timestamp: int

    @property
    def key(self) -> tuple[str, str]:
        return self.student_id, self.date

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "studentId": self.student_id,
            "batchId": self.batch_id,
            "date": self.date,
            "status": self.status.value,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AttendanceRecord":
        return cls(
            id=str(data.get("id", "")),
            student_id=str(data["studentId"]),
            batch_id=str(data.get("batchId", "")),
            date=str(data.get("date", "")),
            status=AttendanceStatus(data["status"]),
            timestamp=int(data.get("timestamp") or 0),
        )


@dataclass(frozen=True)
class MarkingRow:
    """Roster line of a marking session with the status to submit."""

    student_id: str
    name: str
    photo_url: str
    status: AttendanceStatus
    recorded: bool
