from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AttendanceRecord, Session


class SessionRepository(Protocol):
    def list_all(self) -> Sequence[Session]:
        raise NotImplementedError

    def list_by_class(self, class_id: str) -> Sequence[Session]:
        raise NotImplementedError

    def find_for_class_and_date(self, *, class_id: str, session_date: date) -> Sequence[Session]:
        raise NotImplementedError

    def create(
        self,
        *,
        class_id: str,
        session_date: date,
        topic: str,
        attendance_list: Sequence[AttendanceRecord],
    ) -> str:
        raise NotImplementedError
