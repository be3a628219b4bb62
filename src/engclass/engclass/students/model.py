from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Student:
    """Thực thể miền (domain): Học sinh.

    default_fee is the per-session rate in whole VND. class_id may point at a
    class that has since been deleted.
    """

    student_id: str
    name: str
    parent_phone: str
    default_fee: int
    class_id: Optional[str]
