from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..attendance.repository import AttendanceLedger
from ..batches.repository import BatchRepository
from ..common.datetime_utils import last_n_days, today_local
from ..core.constants import AT_RISK_THRESHOLD, DEFAULT_RANGE_DAYS, TREND_TAIL_SESSIONS
from ..core.exceptions import NotFoundError
from ..students.repository import StudentRepository
from .classifier.base import RiskClassifier
from .classifier.threshold_classifier import ThresholdRiskClassifier
from .engine import build_trend, compute_batch_analytics, summarize_history
from .model import BatchAnalytics, BatchDashboard, BatchSummary, TrendPoint

REPORT_FIELDS = ["name", "email", "present", "absent", "late", "rate", "standing"]


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    dashboard: BatchDashboard


class AnalyticsService:
    """Read side: recomputes statistics from store snapshots on every call."""

    def __init__(
        self,
        students: StudentRepository,
        ledger: AttendanceLedger,
        batches: BatchRepository,
        *,
        classifier: Optional[RiskClassifier] = None,
    ):
        self._students = students
        self._ledger = ledger
        self._batches = batches
        self._classifier = classifier or ThresholdRiskClassifier()
        # GOOD standing starts where the at-risk cut ends
        self._good_threshold = float(getattr(self._classifier, "threshold", AT_RISK_THRESHOLD))

    @staticmethod
    def default_range(today: Optional[date] = None) -> tuple[str, str]:
        return last_n_days(today or today_local(), DEFAULT_RANGE_DAYS)

    def _require_batch(self, batch_id: str) -> None:
        if not self._batches.get_by_id(batch_id):
            raise NotFoundError(f"Batch {batch_id} not found")

    def batch_analytics(self, batch_id: str, start: str, end: str) -> BatchAnalytics:
        return compute_batch_analytics(
            self._students.list_for_batch(batch_id),
            self._ledger.list_for_batch(batch_id),
            batch_id,
            start,
            end,
            good_threshold=self._good_threshold,
        )

    def dashboard(self, batch_id: str, start: str, end: str) -> BatchDashboard:
        self._require_batch(batch_id)
        analytics = self.batch_analytics(batch_id, start, end)
        return BatchDashboard(analytics=analytics, at_risk=self._classifier.at_risk(analytics))

    def batch_summary(self, batch_id: str) -> BatchSummary:
        self._require_batch(batch_id)
        return summarize_history(self._students.list_for_batch(batch_id), self._ledger.list_for_batch(batch_id))

    def recent_trend(self, batch_id: str, sessions: int = TREND_TAIL_SESSIONS) -> list[TrendPoint]:
        self._require_batch(batch_id)
        trend = build_trend(self._ledger.list_for_batch(batch_id))
        return trend[-sessions:] if sessions > 0 else []

    def build_student_report(self, batch_id: str, start: str, end: str) -> ReportData:
        dashboard = self.dashboard(batch_id, start, end)
        rows = [
            {
                "name": s.name,
                "email": s.email or "",
                "present": s.present_count,
                "absent": s.absent_count,
                "late": s.late_count,
                "rate": f"{s.rate:.1f}",
                "standing": s.standing.value,
            }
            for s in dashboard.analytics.per_student
        ]
        return ReportData(rows=rows, dashboard=dashboard)


def report_to_csv(data: ReportData) -> bytes:
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=REPORT_FIELDS)
    writer.writeheader()
    for row in data.rows:
        writer.writerow(row)
    return out.getvalue().encode("utf-8-sig")
