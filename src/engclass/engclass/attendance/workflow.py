"""Attendance capture for one class meeting.

The roster is a snapshot taken when the class is selected: students added to
the class afterwards are not part of the saved session until the roster is
explicitly refreshed. Toggles stay in memory until ``save()``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional

from ..common.datetime_utils import now_local, parse_iso_date
from ..core.enums import AttendanceStatus, CaptureStep
from ..core.exceptions import InvalidRequest, ValidationError
from ..core.logging import get_logger
from ..students.repository import StudentRepository
from .model import AttendanceRecord
from .repository import SessionRepository

logger = get_logger(__name__)


@dataclass(frozen=True)
class RosterEntry:
    student_id: str
    name: str
    parent_phone: str = ""


@dataclass
class CaptureState:
    """Explicit, serialisable state of the attendance screen."""

    step: CaptureStep = CaptureStep.IDLE
    class_id: Optional[str] = None
    session_date: Optional[str] = None
    topic: str = ""
    roster: list[RosterEntry] = field(default_factory=list)
    present: dict[str, bool] = field(default_factory=dict)
    last_session_id: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "step": self.step.value,
            "class_id": self.class_id,
            "session_date": self.session_date,
            "topic": self.topic,
            "roster": [
                {"student_id": r.student_id, "name": r.name, "parent_phone": r.parent_phone} for r in self.roster
            ],
            "present": dict(self.present),
            "last_session_id": self.last_session_id,
        }

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "CaptureState":
        if not data:
            return cls()
        return cls(
            step=CaptureStep(data.get("step", CaptureStep.IDLE.value)),
            class_id=data.get("class_id"),
            session_date=data.get("session_date"),
            topic=data.get("topic") or "",
            roster=[
                RosterEntry(
                    student_id=str(r["student_id"]),
                    name=str(r.get("name") or ""),
                    parent_phone=str(r.get("parent_phone") or ""),
                )
                for r in data.get("roster") or []
            ],
            present={str(k): bool(v) for k, v in (data.get("present") or {}).items()},
            last_session_id=data.get("last_session_id"),
        )


class AttendanceCapture:
    """State machine: IDLE -> ROSTER_LOADED -> DIRTY -> SAVED.

    Changing the class always discards the attendance map and re-fetches the
    roster with everyone defaulted to Present.
    """

    def __init__(
        self,
        students: StudentRepository,
        sessions: SessionRepository,
        *,
        state: Optional[CaptureState] = None,
        reject_duplicates: bool = False,
    ):
        self._students = students
        self._sessions = sessions
        self._reject_duplicates = bool(reject_duplicates)
        if state is None:
            state = CaptureState(session_date=now_local().date().isoformat())
        self.state = state

    @property
    def step(self) -> CaptureStep:
        return self.state.step

    def select_class(self, class_id: Optional[str]) -> None:
        self.state.class_id = (class_id or "").strip() or None
        self.state.last_session_id = None
        if not self.state.class_id:
            self.state.roster = []
            self.state.present = {}
            self.state.step = CaptureStep.IDLE
            return
        self._load_roster()

    def refresh_roster(self) -> None:
        if not self.state.class_id:
            raise InvalidRequest("Vui lòng chọn lớp")
        self._load_roster()

    def _load_roster(self) -> None:
        students = self._students.list_by_class(self.state.class_id)
        self.state.roster = [
            RosterEntry(student_id=s.student_id, name=s.name, parent_phone=s.parent_phone) for s in students
        ]
        self.state.present = {entry.student_id: True for entry in self.state.roster}
        self.state.step = CaptureStep.ROSTER_LOADED

    def set_date(self, value: Optional[str]) -> None:
        self.state.session_date = parse_iso_date(value).isoformat() if value else None
        self._details_changed()

    def set_topic(self, value: Optional[str]) -> None:
        self.state.topic = (value or "").strip()
        self._details_changed()

    def _details_changed(self) -> None:
        if self.state.step == CaptureStep.SAVED:
            self.state.step = CaptureStep.ROSTER_LOADED

    def toggle(self, student_id: str) -> bool:
        if self.state.step == CaptureStep.IDLE:
            raise InvalidRequest("Vui lòng chọn lớp")
        if student_id not in self.state.present:
            raise ValidationError("Học sinh không thuộc danh sách lớp")
        self.state.present[student_id] = not self.state.present[student_id]
        self.state.step = CaptureStep.DIRTY
        return self.state.present[student_id]

    def attendance_list(self) -> list[AttendanceRecord]:
        return [
            AttendanceRecord(
                student_id=entry.student_id,
                status=AttendanceStatus.PRESENT if self.state.present.get(entry.student_id, True) else AttendanceStatus.ABSENT,
            )
            for entry in self.state.roster
        ]

    def save(self) -> str:
        if not self.state.class_id or not self.state.session_date:
            raise InvalidRequest("Vui lòng chọn lớp và ngày.")

        session_date: date = parse_iso_date(self.state.session_date)
        if self._reject_duplicates and self._sessions.find_for_class_and_date(
            class_id=self.state.class_id, session_date=session_date
        ):
            raise ValidationError("Lớp này đã được điểm danh trong ngày đã chọn")

        attendance = self.attendance_list()
        session_id = self._sessions.create(
            class_id=self.state.class_id,
            session_date=session_date,
            topic=self.state.topic,
            attendance_list=attendance,
        )
        logger.info(
            "attendance saved",
            extra={"session_id": session_id, "class_id": self.state.class_id, "students": len(attendance)},
        )

        self.state.last_session_id = session_id
        self.state.topic = ""
        self.state.step = CaptureStep.SAVED
        return session_id

    def to_ui(self) -> dict[str, Any]:
        present_count = sum(1 for entry in self.state.roster if self.state.present.get(entry.student_id, True))
        return {
            "step": self.state.step.value,
            "class_id": self.state.class_id,
            "date": self.state.session_date,
            "topic": self.state.topic,
            "students": [
                {
                    "id": entry.student_id,
                    "name": entry.name,
                    "parent_phone": entry.parent_phone,
                    "present": self.state.present.get(entry.student_id, True),
                }
                for entry in self.state.roster
            ],
            "total": len(self.state.roster),
            "present_count": present_count,
            "last_session_id": self.state.last_session_id,
        }
