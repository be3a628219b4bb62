from __future__ import annotations

from typing import Iterable, Optional

from ..attendance.model import Session
from ..common.datetime_utils import parse_month
from ..core.exceptions import StudentNotFound
from ..students.model import Student
from .calculator.base import TuitionCalculator
from .calculator.standard_calculator import PerSessionCalculator
from .model import BillResult

_DEFAULT_CALCULATOR = PerSessionCalculator()


def in_month(session: Session, year: int, month: int) -> bool:
    return session.session_date.year == year and session.session_date.month == month


def compute_bill(
    student: Optional[Student],
    month: str,
    all_sessions: Iterable[Session],
    *,
    calculator: Optional[TuitionCalculator] = None,
) -> BillResult:
    """Turn a set of sessions into the bill of one student for one month.

    A session is billable iff it falls in the calendar month and the student
    is marked Present in it. Pure function: no I/O, inputs are not mutated.
    """
    if student is None:
        raise StudentNotFound("Học sinh không tồn tại")

    year, month_number = parse_month(month)
    billable = [
        s for s in all_sessions if in_month(s, year, month_number) and s.is_present(student.student_id)
    ]
    billable.sort(key=lambda s: s.session_date)

    calc = calculator or _DEFAULT_CALCULATOR
    return BillResult(billable_sessions=tuple(billable), total_amount=calc.amount_due(student, billable))
