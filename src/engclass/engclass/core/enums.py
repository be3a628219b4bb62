from __future__ import annotations

from enum import Enum


class Collection(str, Enum):
    """Tên các collection trong record store."""

    CLASSES = "classes"
    STUDENTS = "students"
    SESSIONS = "sessions"


class AttendanceStatus(str, Enum):
    """Trạng thái điểm danh của một học sinh trong buổi học."""

    PRESENT = "Present"
    ABSENT = "Absent"


class InvoiceStatus(str, Enum):
    PENDING = "Pending"
    PAID = "Paid"


class CaptureStep(str, Enum):
    """Các bước của màn hình điểm danh."""

    IDLE = "IDLE"
    ROSTER_LOADED = "ROSTER_LOADED"
    DIRTY = "DIRTY"
    SAVED = "SAVED"
