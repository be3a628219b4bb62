from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pymongo import MongoClient
from pymongo.database import Database


@dataclass
class MongoConfig:
    uri: str
    database: str
    timeout_ms: int = 5000


class DatabaseConnection:
    """Lazily creates one MongoClient per configuration.

    Note: MongoClient keeps its own connection pool, so the client is shared.
    """

    def __init__(self, config: MongoConfig):
        self._config = config
        self._client: Optional[MongoClient] = None

    def client(self) -> MongoClient:
        if self._client is None:
            self._client = MongoClient(
                self._config.uri,
                serverSelectionTimeoutMS=int(self._config.timeout_ms),
                tz_aware=False,
            )
        return self._client

    def database(self) -> Database:
        return self.client()[self._config.database]

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
