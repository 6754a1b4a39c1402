from __future__ import annotations

import logging
import uuid
from typing import Optional, Sequence

from ..batches.repository import BatchRepository
from ..common.validators import optional_text, require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from .model import Student
from .repository import StudentRepository
from .roster_parser import parse_roster

logger = logging.getLogger(__name__)


class StudentService:
    def __init__(self, students: StudentRepository, batches: BatchRepository):
        self._students = students
        self._batches = batches

    def _require_batch(self, batch_id: str) -> None:
        if not self._batches.get_by_id(batch_id):
            raise NotFoundError(f"Batch {batch_id} not found")

    def add_student(self, batch_id: str, name: str, email: Optional[str] = None) -> Student:
        self._require_batch(batch_id)
        student = Student(
            id=str(uuid.uuid4()),
            name=require_non_empty(name, "Student name"),
            batch_id=batch_id,
            email=optional_text(email),
        )
        self._students.add_many([student])
        return student

    def import_roster(self, batch_id: str, raw_text: str) -> list[Student]:
        self._require_batch(batch_id)
        entries = parse_roster(raw_text)
        if not entries:
            raise ValidationError("No students found in the uploaded roster")

        students = [
            Student(id=str(uuid.uuid4()), name=e.name, batch_id=batch_id, email=e.email, photo_url="")
            for e in entries
        ]
        self._students.add_many(students)
        logger.info("Imported %d students into batch %s", len(students), batch_id)
        return students

    def list_students(self, batch_id: Optional[str] = None) -> Sequence[Student]:
        if batch_id:
            return self._students.list_for_batch(batch_id)
        return self._students.list_all()

    def update_photo(self, student_id: str, photo_url: str) -> None:
        if not self._students.update_photo(student_id, photo_url or ""):
            raise NotFoundError(f"Student {student_id} not found")
