from __future__ import annotations

from datetime import date

from src.engclass.engclass.attendance.document_repository import DocumentSessionRepository
from src.engclass.engclass.core.enums import AttendanceStatus, Collection
from src.engclass.engclass.database.memory_store import InMemoryRecordStore


def _seed(store, **fields):
    doc = {"class_id": "c1", "date": "2025-03-05", "topic": "", "attendance_list": []}
    doc.update(fields)
    return store.create(Collection.SESSIONS, doc)


def test_malformed_sessions_are_skipped():
    store = InMemoryRecordStore()
    good_id = _seed(store, attendance_list=[{"student_id": "s1", "status": "Present"}])
    _seed(store, class_id="other", date="not-a-date")
    _seed(store, attendance_list=[{"status": "Present"}])
    _seed(store, attendance_list=["s1"])

    repo = DocumentSessionRepository(store)

    assert [s.session_id for s in repo.list_all()] == [good_id]
    assert [s.session_id for s in repo.list_by_class("c1")] == [good_id]


def test_unknown_status_counts_as_absent():
    store = InMemoryRecordStore()
    _seed(store, attendance_list=[{"student_id": "s1", "status": "present"}, {"student_id": "s2"}])

    session = DocumentSessionRepository(store).list_all()[0]

    assert session.session_date == date(2025, 3, 5)
    assert [r.status for r in session.attendance_list] == [AttendanceStatus.ABSENT, AttendanceStatus.ABSENT]
    assert session.is_present("s1") is False
