from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..attendance.repository import SessionRepository
from ..common.datetime_utils import parse_month
from ..common.formatting import format_vn_date, format_vnd
from ..core.constants import DEFAULT_TOPIC_LABEL
from ..core.enums import InvoiceStatus
from ..core.exceptions import StudentNotFound, ValidationError
from ..core.logging import get_logger
from ..students.model import Student
from ..students.repository import StudentRepository
from .calculator.base import TuitionCalculator
from .calculator.standard_calculator import PerSessionCalculator
from .engine import compute_bill
from .model import BillResult, Invoice
from .payment_qr import PaymentAccount, build_payment_qr_url, tuition_memo

logger = get_logger(__name__)


@dataclass(frozen=True)
class StudentBill:
    student: Student
    month: str
    result: BillResult
    invoice: Invoice
    qr_url: str


class BillingService:
    """Use case: monthly tuition bills.

    Students and sessions are read as two separate, unsynchronised snapshots.
    An edit landing between the reads may show up in one and not the other;
    for a single-operator tool this torn read is accepted.
    """

    def __init__(
        self,
        students: StudentRepository,
        sessions: SessionRepository,
        *,
        account: PaymentAccount,
        calculator: Optional[TuitionCalculator] = None,
    ):
        self._students = students
        self._sessions = sessions
        self._account = account
        self._calculator = calculator or PerSessionCalculator()

    def calculate(self, *, student_id: str, month: str) -> StudentBill:
        if not student_id:
            raise ValidationError("Vui lòng chọn học sinh")
        parse_month(month)

        student = self._students.get_by_id(student_id)
        if not student:
            raise StudentNotFound("Học sinh không tồn tại")

        result = compute_bill(student, month, self._sessions.list_all(), calculator=self._calculator)
        invoice = Invoice(
            student_id=student.student_id,
            month=month,
            total_sessions=result.total_sessions,
            total_amount=result.total_amount,
        )
        logger.info(
            "bill calculated",
            extra={"student_id": student.student_id, "month": month, "total_sessions": invoice.total_sessions},
        )
        return StudentBill(
            student=student,
            month=month,
            result=result,
            invoice=invoice,
            qr_url=self.payment_qr_url(student=student, month=month, amount=result.total_amount),
        )

    def payment_qr_url(self, *, student: Student, month: str, amount: int) -> str:
        return build_payment_qr_url(
            self._account.bank_id,
            self._account.account_number,
            amount,
            tuition_memo(month, student.name),
            provider=self._account.provider,
        )

    def monthly_summary(self, *, month: str) -> list[dict]:
        """One pending invoice per student for the month, highest amount first."""
        parse_month(month)
        sessions = self._sessions.list_all()

        rows = []
        for student in self._students.list_all():
            result = compute_bill(student, month, sessions, calculator=self._calculator)
            rows.append(
                {
                    "student_id": student.student_id,
                    "name": student.name,
                    "parent_phone": student.parent_phone,
                    "month": month,
                    "total_sessions": result.total_sessions,
                    "default_fee": student.default_fee,
                    "total_amount": result.total_amount,
                    "status": InvoiceStatus.PENDING.value,
                }
            )

        rows.sort(key=lambda r: (-r["total_amount"], r["name"]))
        return rows

    def to_ui(self, bill: StudentBill) -> dict:
        fee = bill.student.default_fee
        return {
            "student": {
                "id": bill.student.student_id,
                "name": bill.student.name,
                "parent_phone": bill.student.parent_phone,
            },
            "month": bill.month,
            "sessions": [
                {
                    "id": s.session_id,
                    "date": s.session_date.isoformat(),
                    "date_display": format_vn_date(s.session_date),
                    "topic": s.topic or DEFAULT_TOPIC_LABEL,
                    "fee": fee,
                    "fee_display": format_vnd(fee),
                }
                for s in bill.result.billable_sessions
            ],
            "total_sessions": bill.invoice.total_sessions,
            "total_amount": bill.invoice.total_amount,
            "total_amount_display": format_vnd(bill.invoice.total_amount),
            "status": bill.invoice.status.value,
            "payment": {
                "qr_url": bill.qr_url,
                "bank_id": self._account.bank_id,
                "account_number": self._account.account_number,
                "account_name": self._account.account_name,
            },
        }
