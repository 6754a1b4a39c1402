from __future__ import annotations

from flask import Flask

from ..common.http import json_body, json_view, ok
from ..container import Container
from ..core.exceptions import ValidationError
from .service import record_from_payload


def register(app: Flask, container: Container) -> None:
    @app.route("/api/batches/<batch_id>/attendance/<date>", methods=["GET"], endpoint="marking_sheet")
    @json_view
    def marking_sheet(batch_id: str, date: str):
        rows = container.attendance_service.marking_sheet(batch_id, date)
        return ok(
            date=date,
            rows=[
                {
                    "studentId": r.student_id,
                    "name": r.name,
                    "photoUrl": r.photo_url,
                    "status": r.status.value,
                    "recorded": r.recorded,
                }
                for r in rows
            ],
        )

    @app.route("/api/batches/<batch_id>/attendance/<date>", methods=["POST"], endpoint="mark_batch")
    @json_view
    def mark_batch(batch_id: str, date: str):
        statuses = json_body().get("statuses") or {}
        if not isinstance(statuses, dict):
            raise ValidationError("statuses must map student ids to statuses")
        records = container.attendance_service.mark_batch(batch_id, date, statuses)
        return ok(201, records=[r.to_dict() for r in records])

    @app.route("/api/attendance", methods=["POST"], endpoint="submit_attendance")
    @json_view
    def submit_attendance():
        items = json_body().get("records") or []
        if not isinstance(items, list) or not all(isinstance(i, dict) for i in items):
            raise ValidationError("records must be a list of objects")
        records = [record_from_payload(i) for i in items]
        container.attendance_service.submit_attendance(records)
        return ok(201, count=len(records))
