from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Collection
from ..database.record_store import Document, RecordStore
from .model import SchoolClass
from .repository import ClassRepository


def _to_class(doc: Document) -> SchoolClass:
    return SchoolClass(class_id=str(doc["id"]), name=str(doc.get("name") or ""))


class DocumentClassRepository(ClassRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def list_all(self) -> Sequence[SchoolClass]:
        return [_to_class(d) for d in self._store.list_all(Collection.CLASSES)]

    def get_by_id(self, class_id: str) -> Optional[SchoolClass]:
        if not class_id:
            return None
        doc = self._store.get(Collection.CLASSES, class_id)
        return _to_class(doc) if doc else None

    def create(self, *, name: str) -> str:
        return self._store.create(Collection.CLASSES, {"name": name})

    def delete_by_id(self, class_id: str) -> bool:
        return self._store.delete(Collection.CLASSES, class_id)
