from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..analytics.model import TrendPoint


@dataclass(frozen=True)
class AtRiskEntry:
    name: str
    rate: float
    absent_count: int

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "rate": self.rate, "absentCount": self.absent_count}


@dataclass(frozen=True)
class InsightRequest:
    """Structured summary handed to the narrative service."""

    batch_name: str
    total_classes: int
    attendance_rate: float
    recent_trend: list[TrendPoint] = field(default_factory=list)
    at_risk_students: list[AtRiskEntry] = field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        return {
            "batchName": self.batch_name,
            "totalClasses": self.total_classes,
            "attendanceRate": self.attendance_rate,
            "recentTrend": [t.to_dict() for t in self.recent_trend],
            "atRiskStudents": [s.to_dict() for s in self.at_risk_students],
        }
