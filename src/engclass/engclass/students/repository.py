from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    """Giao diện repository cho Student.

    Lưu ý (DIP): tầng service phụ thuộc vào interface này, không phụ thuộc trực tiếp DB cụ thể.
    """

    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def list_by_class(self, class_id: str) -> Sequence[Student]:
        raise NotImplementedError

    def get_by_id(self, student_id: str) -> Optional[Student]:
        raise NotImplementedError

    def create(self, *, name: str, parent_phone: str, default_fee: int, class_id: str) -> str:
        raise NotImplementedError

    def update_fee(self, student_id: str, *, default_fee: int) -> bool:
        raise NotImplementedError

    def delete_by_id(self, student_id: str) -> bool:
        raise NotImplementedError
