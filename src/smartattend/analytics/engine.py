"""Pure aggregation over stored students and attendance records.

Nothing here touches the record store; callers hand in snapshots. Dates are
compared as YYYY-MM-DD strings, so canonical zero-padded dates are a caller
obligation.
"""
from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence

from ..attendance.model import AttendanceRecord
from ..core.constants import AT_RISK_THRESHOLD, WARNING_THRESHOLD
from ..core.enums import AttendanceStatus, Standing
from ..students.model import Student
from .model import BatchAnalytics, BatchSummary, StudentStats, TrendPoint


def standing_for(rate: float, good_threshold: float = AT_RISK_THRESHOLD) -> Standing:
    if rate >= good_threshold:
        return Standing.GOOD
    if rate >= WARNING_THRESHOLD:
        return Standing.WARNING
    return Standing.CRITICAL


def filter_range(records: Iterable[AttendanceRecord], start: str, end: str) -> list[AttendanceRecord]:
    return [r for r in records if start <= r.date <= end]


def build_trend(records: Iterable[AttendanceRecord]) -> list[TrendPoint]:
    """Group by date; any status other than PRESENT lands in ``absent``."""

    present: Counter[str] = Counter()
    absent: Counter[str] = Counter()
    for r in records:
        if r.status == AttendanceStatus.PRESENT:
            present[r.date] += 1
        else:
            absent[r.date] += 1

    dates = sorted(set(present) | set(absent))
    return [TrendPoint(name=d, present=present[d], absent=absent[d]) for d in dates]


def compute_batch_analytics(
    students: Sequence[Student],
    records: Sequence[AttendanceRecord],
    batch_id: str,
    start: str,
    end: str,
    *,
    good_threshold: float = AT_RISK_THRESHOLD,
) -> BatchAnalytics:
    roster = [s for s in students if s.batch_id == batch_id]
    in_range = filter_range((r for r in records if r.batch_id == batch_id), start, end)

    held = len({r.date for r in in_range})

    present_by_student: Counter[str] = Counter()
    late_by_student: Counter[str] = Counter()
    for r in in_range:
        if r.status == AttendanceStatus.PRESENT:
            present_by_student[r.student_id] += 1
        elif r.status == AttendanceStatus.LATE:
            late_by_student[r.student_id] += 1

    per_student = []
    for s in roster:
        present_count = present_by_student[s.id]
        rate = present_count / held * 100 if held > 0 else 0.0
        per_student.append(
            StudentStats(
                student_id=s.id,
                name=s.name,
                email=s.email,
                photo_url=s.photo_url,
                present_count=present_count,
                absent_count=held - present_count,
                late_count=late_by_student[s.id],
                rate=rate,
                standing=standing_for(rate, good_threshold),
            )
        )
    # list.sort is stable: equal rates keep roster order
    per_student.sort(key=lambda x: x.rate)

    total_present = sum(1 for r in in_range if r.status == AttendanceStatus.PRESENT)
    possible = held * len(roster)
    overall_rate = total_present / possible * 100 if possible > 0 else 0.0

    return BatchAnalytics(
        batch_id=batch_id,
        start=start,
        end=end,
        total_classes_held=held,
        total_present=total_present,
        overall_rate=overall_rate,
        per_student=per_student,
        trend=build_trend(in_range),
    )


def summarize_history(students: Sequence[Student], records: Sequence[AttendanceRecord]) -> BatchSummary:
    """Whole-history summary counted over explicit records only."""

    if not students or not records:
        return BatchSummary(total_classes=0, present_count=0, absent_count=0, attendance_rate=0.0)

    present = sum(1 for r in records if r.status == AttendanceStatus.PRESENT)
    absent = sum(1 for r in records if r.status == AttendanceStatus.ABSENT)
    return BatchSummary(
        total_classes=len({r.date for r in records}),
        present_count=present,
        absent_count=absent,
        attendance_rate=present / len(records) * 100,
    )
