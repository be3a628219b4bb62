from __future__ import annotations

from datetime import datetime

import pytest

from src.engclass.engclass.container import build_container
from src.engclass.engclass.database.memory_store import InMemoryRecordStore


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 3, 15, 18, 30, 0)


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def container(store):
    return build_container(
        store_config={"backend": "memory"},
        payment_config={"bank_id": "MB", "account_number": "0987654321", "account_name": "NGUYEN VAN A"},
        store=store,
    )


@pytest.fixture
def app(monkeypatch, store):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.engclass.engclass.main import create_app

    return create_app(store=store)


@pytest.fixture
def client(app):
    return app.test_client()
