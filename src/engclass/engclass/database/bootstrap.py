from __future__ import annotations

from pymongo import ASCENDING

from ..core.constants import DEFAULT_STUDENT_FEE
from ..core.enums import Collection
from ..core.logging import get_logger
from .mongo_store import store_call
from .record_store import RecordStore

logger = get_logger(__name__)

DEMO_CLASSES: dict[str, list[tuple[str, str, int]]] = {
    "IELTS 6.5 - Tối T2/T4": [
        ("Nguyễn Minh Anh", "0901234567", DEFAULT_STUDENT_FEE),
        ("Trần Gia Huy", "0912345678", DEFAULT_STUDENT_FEE),
    ],
    "Giao tiếp cơ bản": [
        ("Lê Thảo Vy", "0987654321", 120000),
    ],
}


def ensure_indexes(database) -> None:
    """Indexes backing the roster and per-class session lookups."""
    with store_call(Collection.STUDENTS, "tạo index"):
        database[Collection.STUDENTS.value].create_index([("class_id", ASCENDING)])
    with store_call(Collection.SESSIONS, "tạo index"):
        database[Collection.SESSIONS.value].create_index([("class_id", ASCENDING), ("date", ASCENDING)])


def seed_demo_data(store: RecordStore) -> bool:
    """Insert demo classes and students into an empty store.

    Returns False (and writes nothing) when any class already exists.
    """
    if store.list_all(Collection.CLASSES):
        logger.info("seed skipped: classes already present")
        return False

    for class_name, students in DEMO_CLASSES.items():
        class_id = store.create(Collection.CLASSES, {"name": class_name})
        for name, phone, fee in students:
            store.create(
                Collection.STUDENTS,
                {"name": name, "parent_phone": phone, "default_fee": fee, "class_id": class_id},
            )

    logger.info("seeded %d demo classes", len(DEMO_CLASSES))
    return True
