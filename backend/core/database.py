from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from fastapi import Request
import pymongo
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from backend.models import Contact

from .config import Settings

log = logging.getLogger(__name__)

ClientFactory = Callable[..., Any]


class Database:
    """
    Owns the single long-lived MongoDB client of the backend process.

    The client is opened once by connect(). A failed first connect leaves the
    service in the "not connected" state for good; readiness afterwards is
    whatever the driver reports when pinged at request time.
    """

    def __init__(
        self,
        uri: str,
        database: str = "test",
        collection: str = "contacts",
        timeout_ms: int = 5000,
        ping_timeout_ms: int = 1000,
        client_factory: ClientFactory = MongoClient,
    ) -> None:
        self.uri = uri
        self.database_name = database
        self.collection_name = collection
        self.timeout_ms = timeout_ms
        self.ping_timeout_ms = ping_timeout_ms
        self._client_factory = client_factory
        self._client: Optional[Any] = None

    @classmethod
    def from_settings(cls, settings: Settings, client_factory: ClientFactory = MongoClient) -> "Database":
        return cls(
            settings.mongo_uri,
            database=settings.mongo_database,
            collection=settings.mongo_collection,
            timeout_ms=settings.mongo_timeout_ms,
            ping_timeout_ms=settings.mongo_ping_timeout_ms,
            client_factory=client_factory,
        )

    @property
    def connected(self) -> bool:
        return self._client is not None

    @property
    def collection(self) -> Collection:
        if self._client is None:
            raise RuntimeError("MongoDB client is not connected")
        db = self._client.get_default_database(default=self.database_name)
        return db[self.collection_name]

    def connect(self) -> bool:
        client = None
        try:
            client = self._client_factory(self.uri, serverSelectionTimeoutMS=self.timeout_ms)
            client.admin.command("ping")
        except PyMongoError as exc:
            log.error("MongoDB connection error during startup: %s", exc)
            if client is not None:
                client.close()
            return False
        self._client = client
        log.info("MongoDB connected successfully")
        return True

    def is_ready(self) -> bool:
        if self._client is None:
            return False
        try:
            # A ping never outlasts ping_timeout_ms.
            with pymongo.timeout(self.ping_timeout_ms / 1000):
                self._client.admin.command("ping")
        except PyMongoError as exc:
            log.warning("MongoDB ping failed: %s", exc)
            return False
        return True

    def save_contact(self, contact: Contact) -> str:
        result = self.collection.insert_one(contact.model_dump())
        return str(result.inserted_id)

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None


def get_database(request: Request) -> Database:
    return request.app.state.database
