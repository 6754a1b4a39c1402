from __future__ import annotations

import logging
import threading
from typing import Optional, Sequence

from ..core.enums import Collection
from ..storage.repository import RecordStore
from .model import Student

logger = logging.getLogger(__name__)


class StudentRepository:
    """Students collection. Filtering by batch happens here, at read time."""

    def __init__(self, store: RecordStore):
        self._store = store
        self._write_lock = threading.Lock()

    def list_all(self) -> Sequence[Student]:
        students = []
        for d in self._store.get(Collection.STUDENTS):
            try:
                students.append(Student.from_dict(d))
            except (KeyError, ValueError, TypeError):
                logger.warning("Skipping malformed student entry %r", d.get("name"))
        return students

    def list_for_batch(self, batch_id: str) -> Sequence[Student]:
        return [s for s in self.list_all() if s.batch_id == batch_id]

    def get_by_id(self, student_id: str) -> Optional[Student]:
        for student in self.list_all():
            if student.id == student_id:
                return student
        return None

    def add_many(self, students: Sequence[Student]) -> None:
        if not students:
            return
        with self._write_lock:
            items = self._store.get(Collection.STUDENTS)
            items.extend(s.to_dict() for s in students)
            self._store.put(Collection.STUDENTS, items)

    def update_photo(self, student_id: str, photo_url: str) -> bool:
        # entries are edited in place so unreadable neighbours survive the write
        with self._write_lock:
            items = self._store.get(Collection.STUDENTS)
            for d in items:
                if d.get("id") == student_id:
                    d["photoUrl"] = photo_url
                    self._store.put(Collection.STUDENTS, items)
                    return True
        return False
