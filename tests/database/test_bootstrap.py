from __future__ import annotations

from src.engclass.engclass.core.enums import Collection
from src.engclass.engclass.database.bootstrap import DEMO_CLASSES, ensure_indexes, seed_demo_data


def test_seed_fills_empty_store(store):
    assert seed_demo_data(store) is True

    assert len(store.list_all(Collection.CLASSES)) == len(DEMO_CLASSES)
    assert len(store.list_all(Collection.STUDENTS)) == sum(len(v) for v in DEMO_CLASSES.values())


def test_seed_skips_when_classes_exist(store):
    store.create(Collection.CLASSES, {"name": "Existing"})

    assert seed_demo_data(store) is False
    assert store.list_all(Collection.STUDENTS) == []


class RecordingCollection:
    def __init__(self):
        self.indexes = []

    def create_index(self, keys):
        self.indexes.append(keys)


def test_ensure_indexes_targets_roster_and_sessions():
    db = {"students": RecordingCollection(), "sessions": RecordingCollection()}

    ensure_indexes(db)

    assert db["students"].indexes == [[("class_id", 1)]]
    assert db["sessions"].indexes == [[("class_id", 1), ("date", 1)]]
