from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..core.enums import Standing


@dataclass(frozen=True)
class StudentStats:
    student_id: str
    name: str
    email: Optional[str]
    photo_url: Optional[str]
    present_count: int
    absent_count: int
    late_count: int
    rate: float
    standing: Standing

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.student_id,
            "name": self.name,
            "email": self.email,
            "photoUrl": self.photo_url,
            "presentCount": self.present_count,
            "absentCount": self.absent_count,
            "lateCount": self.late_count,
            "rate": self.rate,
            "standing": self.standing.value,
        }


@dataclass(frozen=True)
class TrendPoint:
    """Present vs. non-present counts for one held class."""

    name: str
    present: int
    absent: int

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "present": self.present, "absent": self.absent}


@dataclass(frozen=True)
class BatchAnalytics:
    batch_id: str
    start: str
    end: str
    total_classes_held: int
    total_present: int
    overall_rate: float
    per_student: list[StudentStats] = field(default_factory=list)
    trend: list[TrendPoint] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "batchId": self.batch_id,
            "start": self.start,
            "end": self.end,
            "totalClassesHeld": self.total_classes_held,
            "totalPresent": self.total_present,
            "overallRate": self.overall_rate,
            "perStudent": [s.to_dict() for s in self.per_student],
            "trend": [t.to_dict() for t in self.trend],
        }


@dataclass(frozen=True)
class BatchDashboard:
    """Range analytics bundled with the at-risk subset (worst first)."""

    analytics: BatchAnalytics
    at_risk: list[StudentStats]

    def to_dict(self) -> dict[str, Any]:
        data = self.analytics.to_dict()
        data["atRiskStudents"] = [s.to_dict() for s in self.at_risk]
        data["atRiskCount"] = len(self.at_risk)
        return data


@dataclass(frozen=True)
class BatchSummary:
    """Whole-history counts over explicit records."""

    total_classes: int
    present_count: int
    absent_count: int
    attendance_rate: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalClasses": self.total_classes,
            "presentCount": self.present_count,
            "absentCount": self.absent_count,
            "attendanceRate": self.attendance_rate,
        }
