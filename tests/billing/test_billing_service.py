from __future__ import annotations

from datetime import date

import pytest

from src.engclass.engclass.core.exceptions import StudentNotFound, ValidationError
from src.engclass.engclass.core.enums import AttendanceStatus, Collection, InvoiceStatus


def _seed(store, *, fee=150000):
    class_id = store.create(Collection.CLASSES, {"name": "IELTS"})
    x = store.create(Collection.STUDENTS, {"name": "Minh Anh", "parent_phone": "090", "default_fee": fee, "class_id": class_id})
    y = store.create(Collection.STUDENTS, {"name": "Gia Huy", "parent_phone": "091", "default_fee": 100000, "class_id": class_id})
    return class_id, x, y


def _session(store, class_id, d: str, topic="", **statuses):
    store.create(
        Collection.SESSIONS,
        {
            "class_id": class_id,
            "date": d,
            "topic": topic,
            "attendance_list": [{"student_id": sid, "status": st.value} for sid, st in statuses.items()],
        },
    )


def test_calculate_builds_pending_invoice(store, container):
    class_id, x, y = _seed(store)
    _session(store, class_id, "2025-03-01", **{x: AttendanceStatus.PRESENT, y: AttendanceStatus.ABSENT})
    _session(store, class_id, "2025-03-31", **{x: AttendanceStatus.PRESENT, y: AttendanceStatus.PRESENT})
    _session(store, class_id, "2025-04-01", **{x: AttendanceStatus.PRESENT})

    bill = container.billing_service.calculate(student_id=x, month="2025-03")

    assert bill.invoice.student_id == x
    assert bill.invoice.month == "2025-03"
    assert bill.invoice.total_sessions == 2
    assert bill.invoice.total_amount == 300000
    assert bill.invoice.status == InvoiceStatus.PENDING
    assert [s.session_date for s in bill.result.billable_sessions] == [date(2025, 3, 1), date(2025, 3, 31)]


def test_fee_change_applies_to_past_months(store, container):
    class_id, x, _ = _seed(store)
    _session(store, class_id, "2025-03-05", **{x: AttendanceStatus.PRESENT})

    container.student_service.update_fee(x, default_fee=200000)
    bill = container.billing_service.calculate(student_id=x, month="2025-03")

    assert bill.invoice.total_amount == 200000


def test_unknown_student_short_circuits(container):
    with pytest.raises(StudentNotFound):
        container.billing_service.calculate(student_id="missing", month="2025-03")


def test_missing_student_selection_is_invalid(container):
    with pytest.raises(ValidationError):
        container.billing_service.calculate(student_id="", month="2025-03")


def test_to_ui_formats_amounts_and_qr(store, container):
    class_id, x, _ = _seed(store)
    _session(store, class_id, "2025-03-05", **{x: AttendanceStatus.PRESENT})

    ui = container.billing_service.to_ui(container.billing_service.calculate(student_id=x, month="2025-03"))

    assert ui["total_amount"] == 150000
    assert ui["total_amount_display"] == "150.000 ₫"
    assert ui["sessions"][0]["date_display"] == "05/03/2025"
    assert ui["sessions"][0]["topic"] == "Nội dung học tập"
    assert ui["payment"]["qr_url"] == (
        "https://img.vietqr.io/image/MB-0987654321-compact.png"
        "?amount=150000&addInfo=HOC%20PHI%20THANG%202025-03%20MINH%20ANH"
    )


def test_monthly_summary_lists_every_student(store, container):
    class_id, x, y = _seed(store)
    _session(store, class_id, "2025-03-01", **{x: AttendanceStatus.PRESENT, y: AttendanceStatus.PRESENT})
    _session(store, class_id, "2025-03-08", **{x: AttendanceStatus.PRESENT, y: AttendanceStatus.ABSENT})

    rows = container.billing_service.monthly_summary(month="2025-03")

    assert [r["student_id"] for r in rows] == [x, y]
    assert rows[0]["total_sessions"] == 2
    assert rows[0]["total_amount"] == 300000
    assert rows[1]["total_amount"] == 100000
    assert {r["status"] for r in rows} == {"Pending"}
