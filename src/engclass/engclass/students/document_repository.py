from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Collection
from ..database.record_store import Document, RecordStore
from .model import Student
from .repository import StudentRepository


def _to_student(doc: Document) -> Student:
    return Student(
        student_id=str(doc["id"]),
        name=str(doc.get("name") or ""),
        parent_phone=str(doc.get("parent_phone") or ""),
        default_fee=int(doc.get("default_fee") or 0),
        class_id=doc.get("class_id") or None,
    )


class DocumentStudentRepository(StudentRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def list_all(self) -> Sequence[Student]:
        return [_to_student(d) for d in self._store.list_all(Collection.STUDENTS)]

    def list_by_class(self, class_id: str) -> Sequence[Student]:
        return [_to_student(d) for d in self._store.list_where(Collection.STUDENTS, "class_id", class_id)]

    def get_by_id(self, student_id: str) -> Optional[Student]:
        if not student_id:
            return None
        doc = self._store.get(Collection.STUDENTS, student_id)
        return _to_student(doc) if doc else None

    def create(self, *, name: str, parent_phone: str, default_fee: int, class_id: str) -> str:
        return self._store.create(
            Collection.STUDENTS,
            {"name": name, "parent_phone": parent_phone, "default_fee": int(default_fee), "class_id": class_id},
        )

    def update_fee(self, student_id: str, *, default_fee: int) -> bool:
        return self._store.update(Collection.STUDENTS, student_id, {"default_fee": int(default_fee)})

    def delete_by_id(self, student_id: str) -> bool:
        return self._store.delete(Collection.STUDENTS, student_id)
