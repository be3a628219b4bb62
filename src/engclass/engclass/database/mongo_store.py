from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Mapping, Sequence

from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import PyMongoError

from ..core.enums import Collection
from ..core.exceptions import NotFound, StoreUnavailable, ValidationError
from ..core.logging import get_logger
from .record_store import Document, RecordStore, validate_required

logger = get_logger(__name__)


def to_object_id(kind: Collection, record_id: str) -> ObjectId:
    try:
        return ObjectId(str(record_id))
    except (InvalidId, TypeError) as e:
        raise NotFound(f"Không tìm thấy bản ghi {record_id} trong {Collection(kind).value}") from e


def to_document(raw: Mapping[str, Any]) -> Document:
    doc = {k: v for k, v in raw.items() if k != "_id"}
    doc["id"] = str(raw["_id"])
    return doc


@contextmanager
def store_call(kind: Collection, operation: str) -> Iterator[None]:
    """Translate driver failures into StoreUnavailable."""
    try:
        yield
    except PyMongoError as e:
        logger.warning("store %s on %s failed: %s", operation, Collection(kind).value, e)
        raise StoreUnavailable(f"Không thể {operation} {Collection(kind).value}") from e


class MongoRecordStore(RecordStore):
    """RecordStore backed by a MongoDB database (one collection per kind)."""

    def __init__(self, database):
        self._db = database

    def _collection(self, kind: Collection):
        return self._db[Collection(kind).value]

    def list_all(self, kind: Collection) -> Sequence[Document]:
        with store_call(kind, "đọc"):
            return [to_document(r) for r in self._collection(kind).find()]

    def list_where(self, kind: Collection, field: str, value: Any) -> Sequence[Document]:
        if field in {"id", "_id"}:
            doc = self.get(kind, value)
            return [doc] if doc else []
        with store_call(kind, "đọc"):
            return [to_document(r) for r in self._collection(kind).find({field: value})]

    def get(self, kind: Collection, record_id: str) -> Document | None:
        try:
            oid = to_object_id(kind, record_id)
        except NotFound:
            return None
        with store_call(kind, "đọc"):
            raw = self._collection(kind).find_one({"_id": oid})
        return to_document(raw) if raw else None

    def create(self, kind: Collection, fields: Mapping[str, Any]) -> str:
        validate_required(kind, fields)
        data = {k: v for k, v in fields.items() if k not in {"id", "_id"}}
        with store_call(kind, "tạo"):
            result = self._collection(kind).insert_one(data)
        return str(result.inserted_id)

    def update(self, kind: Collection, record_id: str, partial: Mapping[str, Any]) -> bool:
        changes = {k: v for k, v in partial.items() if k not in {"id", "_id"}}
        if not changes:
            raise ValidationError("Không có dữ liệu cập nhật")
        oid = to_object_id(kind, record_id)
        with store_call(kind, "cập nhật"):
            result = self._collection(kind).update_one({"_id": oid}, {"$set": changes})
        if result.matched_count == 0:
            raise NotFound(f"Không tìm thấy bản ghi {record_id} trong {Collection(kind).value}")
        return True

    def delete(self, kind: Collection, record_id: str) -> bool:
        oid = to_object_id(kind, record_id)
        with store_call(kind, "xóa"):
            result = self._collection(kind).delete_one({"_id": oid})
        if result.deleted_count == 0:
            raise NotFound(f"Không tìm thấy bản ghi {record_id} trong {Collection(kind).value}")
        return True
