from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Value object: điểm danh của một học sinh, chỉ tồn tại bên trong Session."""

    student_id: str
    status: AttendanceStatus

    @property
    def is_present(self) -> bool:
        return self.status == AttendanceStatus.PRESENT


@dataclass(frozen=True)
class Session:
    """Thực thể miền (domain): Buổi học kèm danh sách điểm danh.

    Immutable once created.
    """

    session_id: str
    class_id: str
    session_date: date
    topic: str
    attendance_list: tuple[AttendanceRecord, ...] = ()

    def is_present(self, student_id: str) -> bool:
        return any(r.student_id == student_id and r.is_present for r in self.attendance_list)
