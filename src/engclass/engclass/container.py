from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.document_repository import DocumentSessionRepository
from .attendance.workflow import AttendanceCapture, CaptureState
from .billing.payment_qr import PaymentAccount
from .billing.service import BillingService
from .classes.document_repository import DocumentClassRepository
from .classes.service import ClassService
from .core.constants import DEFAULT_QR_PROVIDER, DEFAULT_STUDENT_FEE
from .dashboard.service import DashboardService
from .database.connection import DatabaseConnection, MongoConfig
from .database.memory_store import InMemoryRecordStore
from .database.mongo_store import MongoRecordStore
from .database.record_store import RecordStore
from .students.document_repository import DocumentStudentRepository
from .students.service import StudentService


@dataclass(frozen=True)
class Container:
    store: RecordStore
    conn: Optional[DatabaseConnection]

    classes_repo: DocumentClassRepository
    students_repo: DocumentStudentRepository
    sessions_repo: DocumentSessionRepository

    class_service: ClassService
    student_service: StudentService
    billing_service: BillingService
    dashboard_service: DashboardService

    reject_duplicate_sessions: bool = False

    def new_attendance_capture(self, state: Optional[CaptureState] = None) -> AttendanceCapture:
        return AttendanceCapture(
            self.students_repo,
            self.sessions_repo,
            state=state,
            reject_duplicates=self.reject_duplicate_sessions,
        )


def build_store(store_config: dict) -> tuple[RecordStore, Optional[DatabaseConnection]]:
    backend = str(store_config.get("backend", "mongo")).lower()
    if backend == "memory":
        return InMemoryRecordStore(), None
    if backend != "mongo":
        raise ValueError(f"Unsupported store backend: {backend}")

    conn = DatabaseConnection(
        MongoConfig(
            uri=str(store_config["uri"]),
            database=str(store_config["database"]),
            timeout_ms=int(store_config.get("timeout_ms", 5000)),
        )
    )
    return MongoRecordStore(conn.database()), conn


def build_container(
    *,
    store_config: dict,
    payment_config: Optional[dict] = None,
    default_fee: int = DEFAULT_STUDENT_FEE,
    reject_duplicate_sessions: bool = False,
    store: Optional[RecordStore] = None,
) -> Container:
    conn: Optional[DatabaseConnection] = None
    if store is None:
        store, conn = build_store(store_config)

    payment_config = payment_config or {}
    account = PaymentAccount(
        bank_id=str(payment_config.get("bank_id", "MB")),
        account_number=str(payment_config.get("account_number", "")),
        account_name=str(payment_config.get("account_name", "")),
        provider=str(payment_config.get("provider") or DEFAULT_QR_PROVIDER),
    )

    classes_repo = DocumentClassRepository(store)
    students_repo = DocumentStudentRepository(store)
    sessions_repo = DocumentSessionRepository(store)

    class_service = ClassService(classes_repo)
    student_service = StudentService(students_repo, classes_repo, default_fee=default_fee)
    billing_service = BillingService(students_repo, sessions_repo, account=account)
    dashboard_service = DashboardService(classes_repo, students_repo)

    return Container(
        store=store,
        conn=conn,
        classes_repo=classes_repo,
        students_repo=students_repo,
        sessions_repo=sessions_repo,
        class_service=class_service,
        student_service=student_service,
        billing_service=billing_service,
        dashboard_service=dashboard_service,
        reject_duplicate_sessions=bool(reject_duplicate_sessions),
    )
