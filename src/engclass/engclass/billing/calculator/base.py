from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ...attendance.model import Session
from ...students.model import Student


class TuitionCalculator(ABC):
    """Calculator interface (Strategy Pattern for tuition)."""

    @abstractmethod
    def amount_due(self, student: Student, billable_sessions: Sequence[Session]) -> int:
        raise NotImplementedError
