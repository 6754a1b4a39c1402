from __future__ import annotations

import pytest

from smartattend.attendance.model import AttendanceRecord
from smartattend.attendance.service import record_from_payload
from smartattend.container import build_container
from smartattend.core.enums import AttendanceStatus
from smartattend.core.exceptions import NotFoundError, ValidationError
from smartattend.storage.memory_store import InMemoryRecordStore


@pytest.fixture()
def container():
    return build_container(store=InMemoryRecordStore())


@pytest.fixture()
def batch_with_roster(container):
    batch = container.batch_service.create_batch("CS 2024 - A")
    alice = container.student_service.add_student(batch.id, "Alice")
    bob = container.student_service.add_student(batch.id, "Bob")
    return batch, alice, bob


def test_mark_batch_creates_one_record_per_roster_student(container, batch_with_roster):
    batch, alice, bob = batch_with_roster

    records = container.attendance_service.mark_batch(
        batch.id, "2026-02-01", {bob.id: "ABSENT"}, now=1700000000000
    )

    assert [(r.student_id, r.status) for r in records] == [
        (alice.id, AttendanceStatus.PRESENT),
        (bob.id, AttendanceStatus.ABSENT),
    ]
    assert all(r.batch_id == batch.id and r.timestamp == 1700000000000 for r in records)
    assert len({r.id for r in records}) == 2
    assert len(container.attendance_service.list_for_batch(batch.id)) == 2


def test_remarking_a_date_supersedes_previous_statuses(container, batch_with_roster):
    batch, alice, bob = batch_with_roster
    container.attendance_service.mark_batch(batch.id, "2026-02-01", {alice.id: "ABSENT"})
    container.attendance_service.mark_batch(batch.id, "2026-02-02")

    container.attendance_service.mark_batch(batch.id, "2026-02-01", {bob.id: "LATE"})

    stored = {(r.student_id, r.date): r.status for r in container.attendance_service.list_all()}
    assert stored == {
        (alice.id, "2026-02-01"): AttendanceStatus.PRESENT,
        (bob.id, "2026-02-01"): AttendanceStatus.LATE,
        (alice.id, "2026-02-02"): AttendanceStatus.PRESENT,
        (bob.id, "2026-02-02"): AttendanceStatus.PRESENT,
    }


def test_mark_batch_rejects_unknown_batch(container):
    with pytest.raises(NotFoundError):
        container.attendance_service.mark_batch("missing", "2026-02-01")


def test_mark_batch_rejects_students_outside_roster(container, batch_with_roster):
    batch, _, _ = batch_with_roster
    other = container.batch_service.create_batch("Other")
    outsider = container.student_service.add_student(other.id, "Eve")

    with pytest.raises(ValidationError):
        container.attendance_service.mark_batch(batch.id, "2026-02-01", {outsider.id: "PRESENT"})
    assert container.attendance_service.list_all() == []


def test_mark_batch_rejects_unknown_status(container, batch_with_roster):
    batch, alice, _ = batch_with_roster

    with pytest.raises(ValidationError):
        container.attendance_service.mark_batch(batch.id, "2026-02-01", {alice.id: "SICK"})


@pytest.mark.parametrize("bad_date", ["2026-2-1", "01/02/2026", "2026-02-30", ""])
def test_submit_rejects_non_canonical_dates(container, bad_date):
    record = AttendanceRecord(
        id="r1", student_id="s1", batch_id="b1", date=bad_date, status=AttendanceStatus.PRESENT, timestamp=1
    )

    with pytest.raises(ValidationError):
        container.attendance_service.submit_attendance([record])
    assert container.attendance_service.list_all() == []


def test_submit_with_empty_input_is_a_noop(container):
    container.attendance_service.submit_attendance([])
    assert container.attendance_service.list_all() == []


def test_marking_sheet_defaults_to_present_and_reflects_stored_status(container, batch_with_roster):
    batch, alice, bob = batch_with_roster
    container.attendance_service.submit_attendance(
        [
            AttendanceRecord(
                id="r1",
                student_id=bob.id,
                batch_id=batch.id,
                date="2026-02-01",
                status=AttendanceStatus.ABSENT,
                timestamp=1,
            )
        ]
    )

    rows = container.attendance_service.marking_sheet(batch.id, "2026-02-01")

    assert [(r.name, r.status, r.recorded) for r in rows] == [
        ("Alice", AttendanceStatus.PRESENT, False),
        ("Bob", AttendanceStatus.ABSENT, True),
    ]


def test_record_from_payload_fills_missing_id_and_timestamp():
    record = record_from_payload(
        {"studentId": "s1", "batchId": "b1", "date": "2026-02-01", "status": "LATE"}, now=42
    )

    assert record.status == AttendanceStatus.LATE
    assert record.timestamp == 42
    assert record.id


def test_record_from_payload_requires_student_and_valid_status():
    with pytest.raises(ValidationError):
        record_from_payload({"date": "2026-02-01", "status": "PRESENT"})
    with pytest.raises(ValidationError):
        record_from_payload({"studentId": "s1", "date": "2026-02-01", "status": "present"})


def test_record_from_payload_rejects_non_numeric_timestamp():
    with pytest.raises(ValidationError):
        record_from_payload({"studentId": "s1", "date": "2026-02-01", "status": "PRESENT", "timestamp": "soon"})


def _record(student_id: str, batch_id: str, date: str = "2026-02-01") -> AttendanceRecord:
    return AttendanceRecord(
        id=f"{student_id}-{date}",
        student_id=student_id,
        batch_id=batch_id,
        date=date,
        status=AttendanceStatus.ABSENT,
        timestamp=1,
    )


@pytest.mark.parametrize("wrong_batch", ["other", ""])
def test_submit_rejects_record_outside_student_batch(container, batch_with_roster, wrong_batch):
    batch, alice, _ = batch_with_roster
    other = container.batch_service.create_batch("Other")
    container.attendance_service.mark_batch(batch.id, "2026-02-01")
    batch_id = other.id if wrong_batch == "other" else ""

    with pytest.raises(ValidationError):
        container.attendance_service.submit_attendance([_record(alice.id, batch_id)])

    analytics = container.analytics_service.batch_analytics(batch.id, "2026-02-01", "2026-02-28")
    assert analytics.total_classes_held == 1
    assert {r.batch_id for r in container.attendance_service.list_all()} == {batch.id}


def test_submit_rejects_unknown_student_and_writes_nothing(container, batch_with_roster):
    batch, alice, _ = batch_with_roster

    with pytest.raises(NotFoundError):
        container.attendance_service.submit_attendance([_record(alice.id, batch.id), _record("ghost", batch.id)])
    assert container.attendance_service.list_all() == []


def test_submit_accepts_records_matching_student_batch(container, batch_with_roster):
    batch, alice, bob = batch_with_roster

    container.attendance_service.submit_attendance([_record(alice.id, batch.id), _record(bob.id, batch.id)])

    assert len(container.attendance_service.list_for_batch(batch.id)) == 2
