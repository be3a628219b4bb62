from __future__ import annotations

import copy
import uuid
from typing import Any, Mapping, Sequence

from ..core.enums import Collection
from ..core.exceptions import NotFound, ValidationError
from .record_store import Document, RecordStore, validate_required


class InMemoryRecordStore(RecordStore):
    """Dict-backed RecordStore for local development and tests.

    Documents are deep-copied on the way in and out so callers never share
    mutable state with the store.
    """

    def __init__(self):
        self._data: dict[Collection, dict[str, Document]] = {kind: {} for kind in Collection}

    def _bucket(self, kind: Collection) -> dict[str, Document]:
        return self._data[Collection(kind)]

    @staticmethod
    def _out(record_id: str, doc: Document) -> Document:
        out = copy.deepcopy(doc)
        out["id"] = record_id
        return out

    def list_all(self, kind: Collection) -> Sequence[Document]:
        return [self._out(rid, d) for rid, d in self._bucket(kind).items()]

    def list_where(self, kind: Collection, field: str, value: Any) -> Sequence[Document]:
        if field == "id":
            doc = self.get(kind, value)
            return [doc] if doc else []
        return [self._out(rid, d) for rid, d in self._bucket(kind).items() if d.get(field) == value]

    def get(self, kind: Collection, record_id: str) -> Document | None:
        doc = self._bucket(kind).get(str(record_id))
        return self._out(str(record_id), doc) if doc is not None else None

    def create(self, kind: Collection, fields: Mapping[str, Any]) -> str:
        validate_required(kind, fields)
        record_id = uuid.uuid4().hex
        self._bucket(kind)[record_id] = copy.deepcopy({k: v for k, v in fields.items() if k != "id"})
        return record_id

    def update(self, kind: Collection, record_id: str, partial: Mapping[str, Any]) -> bool:
        changes = {k: v for k, v in partial.items() if k != "id"}
        if not changes:
            raise ValidationError("Không có dữ liệu cập nhật")
        doc = self._bucket(kind).get(str(record_id))
        if doc is None:
            raise NotFound(f"Không tìm thấy bản ghi {record_id} trong {Collection(kind).value}")
        doc.update(copy.deepcopy(changes))
        return True

    def delete(self, kind: Collection, record_id: str) -> bool:
        if self._bucket(kind).pop(str(record_id), None) is None:
            raise NotFound(f"Không tìm thấy bản ghi {record_id} trong {Collection(kind).value}")
        return True
