from __future__ import annotations

from dataclasses import dataclass

from ..attendance.model import Session
from ..core.enums import InvoiceStatus


@dataclass(frozen=True)
class BillResult:
    """Output of the billing engine: billable sessions sorted by date plus the amount due."""

    billable_sessions: tuple[Session, ...]
    total_amount: int

    @property
    def total_sessions(self) -> int:
        return len(self.billable_sessions)


@dataclass(frozen=True)
class Invoice:
    """Phiếu báo học phí. Computed on demand, never written back to the store."""

    student_id: str
    month: str
    total_sessions: int
    total_amount: int
    status: InvoiceStatus = InvoiceStatus.PENDING
