from __future__ import annotations

from dataclasses import dataclass

from ..classes.repository import ClassRepository
from ..common.formatting import class_badge
from ..students.repository import StudentRepository


@dataclass(frozen=True)
class Overview:
    class_count: int
    student_count: int
    classes: list[dict]


class DashboardService:
    """Use case: overview screen. Any failed read aborts the whole overview."""

    def __init__(self, classes: ClassRepository, students: StudentRepository):
        self._classes = classes
        self._students = students

    def overview(self) -> Overview:
        classes = self._classes.list_all()
        students = self._students.list_all()

        per_class: dict[str, int] = {}
        for s in students:
            if s.class_id:
                per_class[s.class_id] = per_class.get(s.class_id, 0) + 1

        return Overview(
            class_count=len(classes),
            student_count=len(students),
            classes=[
                {
                    "id": c.class_id,
                    "name": c.name,
                    "badge": class_badge(c.name),
                    "student_count": per_class.get(c.class_id, 0),
                }
                for c in classes
            ],
        )
