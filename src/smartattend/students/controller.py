from __future__ import annotations

from flask import Flask, request

from ..common.http import json_body, json_view, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/batches/<batch_id>/students", methods=["GET"], endpoint="list_students")
    @json_view
    def list_students(batch_id: str):
        container.batch_service.get_batch(batch_id)
        students = container.student_service.list_students(batch_id)
        return ok(students=[s.to_dict() for s in students])

    @app.route("/api/batches/<batch_id>/students", methods=["POST"], endpoint="add_student")
    @json_view
    def add_student(batch_id: str):
        data = json_body()
        student = container.student_service.add_student(batch_id, data.get("name", ""), data.get("email"))
        return ok(201, student=student.to_dict())

    @app.route("/api/batches/<batch_id>/students/import", methods=["POST"], endpoint="import_roster")
    @json_view
    def import_roster(batch_id: str):
        """Accepts a JSON ``{"text": ...}`` body, an uploaded file or raw text."""

        if request.is_json:
            text = str(json_body().get("text") or "")
        elif "file" in request.files:
            text = request.files["file"].read().decode("utf-8-sig", errors="replace")
        else:
            text = request.get_data(as_text=True)

        students = container.student_service.import_roster(batch_id, text)
        return ok(201, students=[s.to_dict() for s in students], count=len(students))

    @app.route("/api/students/<student_id>/photo", methods=["PUT"], endpoint="update_student_photo")
    @json_view
    def update_student_photo(student_id: str):
        data = json_body()
        container.student_service.update_photo(student_id, str(data.get("photoUrl") or ""))
        return ok()
