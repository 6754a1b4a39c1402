from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    LATE = "LATE"


class Collection(str, Enum):
    """Logical collections kept by the record store."""

    BATCHES = "batches"
    STUDENTS = "students"
    ATTENDANCE = "attendance"


class Standing(str, Enum):
    """Attendance standing shown in the detailed student report."""

    GOOD = "GOOD"
    WARNING = "WARNING"
    CRITICAL = "CRITICAL"
