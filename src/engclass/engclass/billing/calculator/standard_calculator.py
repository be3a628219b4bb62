from __future__ import annotations

from typing import Sequence

from .base import TuitionCalculator
from ...attendance.model import Session
from ...students.model import Student


class PerSessionCalculator(TuitionCalculator):
    """Standard rule: billable sessions x the student's current default_fee.

    The fee is not snapshotted per session, so editing a student's fee also
    changes the totals of past months.
    """

    def amount_due(self, student: Student, billable_sessions: Sequence[Session]) -> int:
        return len(billable_sessions) * int(student.default_fee)
