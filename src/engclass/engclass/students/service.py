from __future__ import annotations

from typing import Optional, Sequence

from ..classes.repository import ClassRepository
from ..common.formatting import format_vnd
from ..common.validators import require_fee, require_non_empty
from ..core.constants import DEFAULT_STUDENT_FEE, UNASSIGNED_CLASS_LABEL
from ..core.logging import get_logger
from .model import Student
from .repository import StudentRepository

logger = get_logger(__name__)


class StudentService:
    """Use case: manage students and their per-session fee."""

    def __init__(self, students: StudentRepository, classes: ClassRepository, *, default_fee: int = DEFAULT_STUDENT_FEE):
        self._students = students
        self._classes = classes
        self._default_fee = int(default_fee)

    def list_students(self, *, class_id: Optional[str] = None) -> Sequence[Student]:
        if class_id and class_id != "all":
            return self._students.list_by_class(class_id)
        return self._students.list_all()

    def get_student(self, student_id: str) -> Optional[Student]:
        return self._students.get_by_id(student_id)

    def create_student(
        self,
        *,
        name: str,
        class_id: str,
        parent_phone: str = "",
        default_fee=None,
    ) -> str:
        name = require_non_empty(name, "Họ tên học sinh")
        class_id = require_non_empty(class_id, "Lớp")
        fee = self._default_fee if default_fee in (None, "") else require_fee(default_fee)

        student_id = self._students.create(
            name=name,
            parent_phone=(parent_phone or "").strip(),
            default_fee=fee,
            class_id=class_id,
        )
        logger.info("student created", extra={"student_id": student_id, "class_id": class_id})
        return student_id

    def update_fee(self, student_id: str, *, default_fee) -> int:
        """Change the rate in place. Past bills are recomputed with the new rate."""
        fee = require_fee(default_fee)
        self._students.update_fee(student_id, default_fee=fee)
        logger.info("student fee updated", extra={"student_id": student_id, "default_fee": fee})
        return fee

    def delete_student(self, student_id: str) -> None:
        self._students.delete_by_id(student_id)
        logger.info("student deleted", extra={"student_id": student_id})

    def list_admin_view(self, *, class_id: Optional[str] = None) -> list[dict]:
        class_names = {c.class_id: c.name for c in self._classes.list_all()}
        return [
            {
                "id": s.student_id,
                "name": s.name,
                "parent_phone": s.parent_phone,
                "class_id": s.class_id,
                "class_name": class_names.get(s.class_id or "", UNASSIGNED_CLASS_LABEL),
                "default_fee": s.default_fee,
                "default_fee_display": format_vnd(s.default_fee),
            }
            for s in self.list_students(class_id=class_id)
        ]
