from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

from ..core.constants import REQUIRED_FIELDS
from ..core.enums import Collection
from ..core.exceptions import ValidationError

Document = dict[str, Any]


class RecordStore(Protocol):
    """Giao diện client cho record store dạng document (classes/students/sessions).

    Every returned document carries its generated id under the ``id`` key.
    There are no transactions: concurrent updates to one record are last-write-wins.
    """

    def list_all(self, kind: Collection) -> Sequence[Document]:
        raise NotImplementedError

    def list_where(self, kind: Collection, field: str, value: Any) -> Sequence[Document]:
        raise NotImplementedError

    def get(self, kind: Collection, record_id: str) -> Document | None:
        raise NotImplementedError

    def create(self, kind: Collection, fields: Mapping[str, Any]) -> str:
        raise NotImplementedError

    def update(self, kind: Collection, record_id: str, partial: Mapping[str, Any]) -> bool:
        raise NotImplementedError

    def delete(self, kind: Collection, record_id: str) -> bool:
        """Delete a record; a missing id raises NotFound (not idempotent)."""

        raise NotImplementedError


def validate_required(kind: Collection, fields: Mapping[str, Any]) -> None:
    for name in REQUIRED_FIELDS.get(Collection(kind), ()):
        value = fields.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationError(f"Thiếu trường bắt buộc: {name}")
