from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .analytics.classifier.threshold_classifier import ThresholdRiskClassifier
from .analytics.service import AnalyticsService
from .attendance.repository import AttendanceLedger
from .attendance.service import AttendanceService
from .batches.repository import BatchRepository
from .batches.service import BatchService
from .core.constants import AT_RISK_THRESHOLD, DEFAULT_STORAGE_NAMESPACE, INSIGHT_TIMEOUT_SECONDS
from .database.connection import DBConfig, DatabaseConnection
from .insights.gateway import DisabledInsightGateway, HttpInsightGateway, InsightGateway
from .insights.service import InsightService
from .storage.memory_store import InMemoryRecordStore
from .storage.mysql_store import MySQLRecordStore
from .storage.repository import RecordStore
from .students.repository import StudentRepository
from .students.service import StudentService


@dataclass(frozen=True)
class Container:
    store: RecordStore

    batches_repo: BatchRepository
    students_repo: StudentRepository
    ledger: AttendanceLedger

    batch_service: BatchService
    student_service: StudentService
    attendance_service: AttendanceService
    analytics_service: AnalyticsService
    insight_service: InsightService


def store_backend(settings) -> str:
    return str(getattr(settings, "STORE_BACKEND", "memory")).strip().lower()


def build_store(settings) -> RecordStore:
    backend = store_backend(settings)
    namespace = getattr(settings, "STORAGE_NAMESPACE", DEFAULT_STORAGE_NAMESPACE)
    if backend == "mysql":
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(getattr(settings, "DB_CONFIG")))
        return MySQLRecordStore(conn, namespace)
    if backend == "memory":
        return InMemoryRecordStore(namespace)
    raise ValueError(f"Unsupported STORE_BACKEND: {backend!r}")


def build_gateway(settings) -> InsightGateway:
    url = getattr(settings, "INSIGHT_API_URL", "")
    if not url:
        return DisabledInsightGateway()
    return HttpInsightGateway(
        url,
        api_key=getattr(settings, "INSIGHT_API_KEY", ""),
        timeout=float(getattr(settings, "INSIGHT_TIMEOUT_SECONDS", INSIGHT_TIMEOUT_SECONDS)),
    )


def build_container(
    *,
    store: RecordStore,
    gateway: Optional[InsightGateway] = None,
    at_risk_threshold: float = AT_RISK_THRESHOLD,
) -> Container:
    batches_repo = BatchRepository(store)
    students_repo = StudentRepository(store)
    ledger = AttendanceLedger(store)

    batch_service = BatchService(batches_repo)
    student_service = StudentService(students_repo, batches_repo)
    attendance_service = AttendanceService(ledger, students_repo, batches_repo)
    analytics_service = AnalyticsService(
        students_repo,
        ledger,
        batches_repo,
        classifier=ThresholdRiskClassifier(at_risk_threshold),
    )
    insight_service = InsightService(analytics_service, batches_repo, gateway or DisabledInsightGateway())

    return Container(
        store=store,
        batches_repo=batches_repo,
        students_repo=students_repo,
        ledger=ledger,
        batch_service=batch_service,
        student_service=student_service,
        attendance_service=attendance_service,
        analytics_service=analytics_service,
        insight_service=insight_service,
    )
