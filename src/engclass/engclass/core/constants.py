"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from .enums import Collection

DEFAULT_STUDENT_FEE = 150000

REQUIRED_FIELDS = {
    Collection.CLASSES: ("name",),
    Collection.STUDENTS: ("name", "class_id"),
    Collection.SESSIONS: ("class_id", "date"),
}

UNASSIGNED_CLASS_LABEL = "Chưa xếp lớp"
DEFAULT_TOPIC_LABEL = "Nội dung học tập"

DEFAULT_QR_PROVIDER = "https://img.vietqr.io"
QR_MEMO_TEMPLATE = "HOC PHI THANG {month} {student_name}"
