from __future__ import annotations

from datetime import date

import pytest

from src.engclass.engclass.attendance.workflow import AttendanceCapture, CaptureState
from src.engclass.engclass.core.enums import AttendanceStatus, CaptureStep
from src.engclass.engclass.core.exceptions import InvalidRequest, ValidationError
from src.engclass.engclass.students.model import Student


class FakeStudents:
    def __init__(self, students):
        self.students = list(students)
        self.roster_calls = 0

    def list_by_class(self, class_id):
        self.roster_calls += 1
        return [s for s in self.students if s.class_id == class_id]


class FakeSessions:
    def __init__(self):
        self.created = []

    def find_for_class_and_date(self, *, class_id, session_date):
        return [c for c in self.created if c["class_id"] == class_id and c["session_date"] == session_date]

    def create(self, *, class_id, session_date, topic, attendance_list):
        self.created.append(
            {"class_id": class_id, "session_date": session_date, "topic": topic, "attendance_list": list(attendance_list)}
        )
        return f"s{len(self.created)}"


def student(sid, class_id="c1"):
    return Student(student_id=sid, name=sid.upper(), parent_phone="", default_fee=150000, class_id=class_id)


@pytest.fixture
def students():
    return FakeStudents([student("a"), student("b"), student("z", class_id="c2")])


@pytest.fixture
def sessions():
    return FakeSessions()


def test_new_capture_defaults_to_today_and_idle(students, sessions, monkeypatch, fixed_now):
    monkeypatch.setattr("src.engclass.engclass.attendance.workflow.now_local", lambda: fixed_now)

    capture = AttendanceCapture(students, sessions)

    assert capture.step == CaptureStep.IDLE
    assert capture.state.session_date == "2025-03-15"


def test_select_class_defaults_everyone_present(students, sessions):
    capture = AttendanceCapture(students, sessions)
    capture.select_class("c1")

    assert capture.step == CaptureStep.ROSTER_LOADED
    assert capture.state.present == {"a": True, "b": True}


def test_toggle_flips_and_marks_dirty(students, sessions):
    capture = AttendanceCapture(students, sessions)
    capture.select_class("c1")

    assert capture.toggle("b") is False
    assert capture.step == CaptureStep.DIRTY
    assert capture.toggle("b") is True
    assert sessions.created == []


def test_toggle_unknown_student_rejected(students, sessions):
    capture = AttendanceCapture(students, sessions)
    capture.select_class("c1")

    with pytest.raises(ValidationError):
        capture.toggle("z")


def test_changing_class_discards_toggles(students, sessions):
    capture = AttendanceCapture(students, sessions)
    capture.select_class("c1")
    capture.toggle("a")

    capture.select_class("c2")
    assert capture.state.present == {"z": True}

    capture.select_class("c1")
    assert capture.state.present == {"a": True, "b": True}
    assert capture.step == CaptureStep.ROSTER_LOADED


def test_save_without_class_makes_no_store_call(students, sessions):
    capture = AttendanceCapture(students, sessions)

    with pytest.raises(InvalidRequest):
        capture.save()
    assert sessions.created == []


def test_save_without_date_makes_no_store_call(students, sessions):
    capture = AttendanceCapture(students, sessions)
    capture.select_class("c1")
    capture.set_date("")

    with pytest.raises(InvalidRequest):
        capture.save()
    assert sessions.created == []


def test_save_materialises_attendance_list(students, sessions):
    capture = AttendanceCapture(students, sessions)
    capture.select_class("c1")
    capture.set_date("2025-03-01")
    capture.set_topic("Grammar Unit 10")
    capture.toggle("b")

    session_id = capture.save()

    assert session_id == "s1"
    saved = sessions.created[0]
    assert saved["class_id"] == "c1"
    assert saved["session_date"] == date(2025, 3, 1)
    assert saved["topic"] == "Grammar Unit 10"
    assert [(r.student_id, r.status) for r in saved["attendance_list"]] == [
        ("a", AttendanceStatus.PRESENT),
        ("b", AttendanceStatus.ABSENT),
    ]
    assert capture.step == CaptureStep.SAVED
    assert capture.state.topic == ""


def test_roster_is_a_snapshot(students, sessions):
    capture = AttendanceCapture(students, sessions)
    capture.select_class("c1")
    capture.set_date("2025-03-01")

    students.students.append(student("c"))
    capture.save()

    ids = [r.student_id for r in sessions.created[0]["attendance_list"]]
    assert ids == ["a", "b"]


def test_refresh_roster_picks_up_new_students(students, sessions):
    capture = AttendanceCapture(students, sessions)
    capture.select_class("c1")
    capture.toggle("a")
    students.students.append(student("c"))

    capture.refresh_roster()

    assert capture.state.present == {"a": True, "b": True, "c": True}


def test_refresh_without_class_is_invalid(students, sessions):
    with pytest.raises(InvalidRequest):
        AttendanceCapture(students, sessions).refresh_roster()


def test_duplicate_saves_create_two_sessions_by_default(students, sessions):
    capture = AttendanceCapture(students, sessions)
    capture.select_class("c1")
    capture.set_date("2025-03-01")

    capture.save()
    capture.save()

    assert len(sessions.created) == 2


def test_duplicate_saves_rejected_when_enabled(students, sessions):
    capture = AttendanceCapture(students, sessions, reject_duplicates=True)
    capture.select_class("c1")
    capture.set_date("2025-03-01")
    capture.save()

    with pytest.raises(ValidationError):
        capture.save()
    assert len(sessions.created) == 1


def test_state_round_trips_through_dict(students, sessions):
    capture = AttendanceCapture(students, sessions)
    capture.select_class("c1")
    capture.set_date("2025-03-01")
    capture.toggle("a")

    restored = AttendanceCapture(students, sessions, state=CaptureState.from_dict(capture.state.to_dict()))

    assert restored.step == CaptureStep.DIRTY
    assert restored.state.present == {"a": False, "b": True}
    assert students.roster_calls == 1


def test_detail_change_after_save_returns_to_roster_loaded(students, sessions):
    capture = AttendanceCapture(students, sessions)
    capture.select_class("c1")
    capture.set_date("2025-03-01")
    capture.save()

    capture.set_topic("Speaking")

    assert capture.step == CaptureStep.ROSTER_LOADED
