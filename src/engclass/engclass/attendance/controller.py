from __future__ import annotations

from flask import Flask, request, session

from ..common.formatting import format_vn_date
from ..common.responses import fail, ok
from ..container import Container
from .workflow import AttendanceCapture, CaptureState

SESSION_KEY = "attendance_capture"


def register(app: Flask, container: Container) -> None:
    def _load() -> AttendanceCapture:
        state = CaptureState.from_dict(session.get(SESSION_KEY)) if SESSION_KEY in session else None
        return container.new_attendance_capture(state)

    def _store(capture: AttendanceCapture) -> None:
        session[SESSION_KEY] = capture.state.to_dict()

    @app.route("/api/attendance/capture", methods=["GET"], endpoint="attendance_capture")
    def attendance_capture():
        capture = _load()
        _store(capture)
        return ok(capture=capture.to_ui())

    @app.route("/api/attendance/capture/class", methods=["POST"], endpoint="attendance_select_class")
    def attendance_select_class():
        data = request.get_json(silent=True) or {}
        capture = _load()
        capture.select_class(data.get("class_id"))
        _store(capture)
        return ok(capture=capture.to_ui())

    @app.route("/api/attendance/capture/refresh", methods=["POST"], endpoint="attendance_refresh_roster")
    def attendance_refresh_roster():
        capture = _load()
        capture.refresh_roster()
        _store(capture)
        return ok(capture=capture.to_ui())

    @app.route("/api/attendance/capture/details", methods=["PUT"], endpoint="attendance_details")
    def attendance_details():
        data = request.get_json(silent=True) or {}
        capture = _load()
        if "date" in data:
            capture.set_date(data.get("date"))
        if "topic" in data:
            capture.set_topic(data.get("topic"))
        _store(capture)
        return ok(capture=capture.to_ui())

    @app.route("/api/attendance/capture/toggle/<student_id>", methods=["POST"], endpoint="attendance_toggle")
    def attendance_toggle(student_id: str):
        capture = _load()
        capture.toggle(student_id)
        _store(capture)
        return ok(capture=capture.to_ui())

    @app.route("/api/attendance/capture/save", methods=["POST"], endpoint="attendance_save")
    def attendance_save():
        capture = _load()
        session_id = capture.save()
        _store(capture)
        return ok(201, id=session_id, capture=capture.to_ui(), message="Đã lưu điểm danh thành công!")

    @app.route("/api/attendance/sessions", methods=["GET"], endpoint="attendance_sessions")
    def attendance_sessions():
        class_id = request.args.get("class_id")
        if not class_id:
            return fail("Thiếu tham số class_id", 400)
        sessions = container.sessions_repo.list_by_class(class_id)
        return ok(
            sessions=[
                {
                    "id": s.session_id,
                    "date": s.session_date.isoformat(),
                    "date_display": format_vn_date(s.session_date),
                    "topic": s.topic,
                    "present_count": sum(1 for a in s.attendance_list if a.is_present),
                    "total": len(s.attendance_list),
                }
                for s in sessions
            ]
        )
