from __future__ import annotations

from datetime import date
from typing import Iterable, Sequence

from ..common.datetime_utils import parse_iso_date
from ..core.enums import AttendanceStatus, Collection
from ..core.exceptions import ValidationError
from ..core.logging import get_logger
from ..database.record_store import Document, RecordStore
from .model import AttendanceRecord, Session
from .repository import SessionRepository

logger = get_logger(__name__)


def _to_status(value) -> AttendanceStatus:
    # Anything other than an exact "Present" is not billable.
    if value == AttendanceStatus.PRESENT.value:
        return AttendanceStatus.PRESENT
    return AttendanceStatus.ABSENT


def _to_session(doc: Document) -> Session:
    return Session(
        session_id=str(doc["id"]),
        class_id=str(doc.get("class_id") or ""),
        session_date=parse_iso_date(doc.get("date")),
        topic=str(doc.get("topic") or ""),
        attendance_list=tuple(
            AttendanceRecord(student_id=str(a["student_id"]), status=_to_status(a.get("status")))
            for a in (doc.get("attendance_list") or [])
        ),
    )


def _decode_all(docs: Iterable[Document]) -> list[Session]:
    """Decode session documents; malformed ones are logged and skipped."""
    sessions = []
    for doc in docs:
        try:
            session = _to_session(doc)
        except (ValidationError, KeyError, TypeError, AttributeError, ValueError) as e:
            logger.warning("skipping malformed session", extra={"session_id": doc.get("id"), "error": str(e)})
            continue
        sessions.append(session)
    return sessions


class DocumentSessionRepository(SessionRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def list_all(self) -> Sequence[Session]:
        return _decode_all(self._store.list_all(Collection.SESSIONS))

    def list_by_class(self, class_id: str) -> Sequence[Session]:
        sessions = _decode_all(self._store.list_where(Collection.SESSIONS, "class_id", class_id))
        sessions.sort(key=lambda s: s.session_date, reverse=True)
        return sessions

    def find_for_class_and_date(self, *, class_id: str, session_date: date) -> Sequence[Session]:
        return [s for s in self.list_by_class(class_id) if s.session_date == session_date]

    def create(
        self,
        *,
        class_id: str,
        session_date: date,
        topic: str,
        attendance_list: Sequence[AttendanceRecord],
    ) -> str:
        return self._store.create(
            Collection.SESSIONS,
            {
                "class_id": class_id,
                "date": session_date.isoformat(),
                "topic": topic,
                "attendance_list": [{"student_id": a.student_id, "status": a.status.value} for a in attendance_list],
            },
        )
