from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SchoolClass:
    """Thực thể miền (domain): Lớp học."""

    class_id: str
    name: str
