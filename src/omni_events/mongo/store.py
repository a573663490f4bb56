"""MongoDB implementation of the document store protocols."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Sequence

from pymongo import AsyncMongoClient
from pymongo.asynchronous.change_stream import AsyncChangeStream
from pymongo.asynchronous.collection import AsyncCollection

from omni_events.models.records import ChangeNotification

log = logging.getLogger(__name__)


class MongoChangeFeed:
    """Change stream over one collection.

    Without ``full_document_lookup`` only inserts and replaces carry a full
    document; updates and deletes come through with ``full_document=None``.
    """

    def __init__(self, collection: AsyncCollection, full_document_lookup: bool = False) -> None:
        self._collection = collection
        self._full_document = "updateLookup" if full_document_lookup else None

    @asynccontextmanager
    async def open(self) -> AsyncIterator[AsyncIterator[ChangeNotification]]:
        stream = await self._collection.watch(full_document=self._full_document)
        log.debug("Change stream opened on %s", self._collection.name)
        async with stream:
            yield _notifications(stream)


async def _notifications(stream: AsyncChangeStream) -> AsyncIterator[ChangeNotification]:
    async for change in stream:
        yield ChangeNotification(
            operation_type=change.get("operationType", ""),
            full_document=change.get("fullDocument"),
        )


class MongoEventStore:
    """Document source, sink and change feeds backed by one Mongo database."""

    def __init__(self, uri: str, database: str) -> None:
        self._client: AsyncMongoClient = AsyncMongoClient(uri)
        self._db = self._client[database]

    def feed(self, collection: str, full_document_lookup: bool = False) -> MongoChangeFeed:
        return MongoChangeFeed(self._db[collection], full_document_lookup)

    async def find_all(self, collection: str) -> list[dict[str, Any]]:
        documents = [doc async for doc in self._db[collection].find({})]
        log.info("Read %d documents from %s", len(documents), collection)
        return documents

    async def insert_many(self, collection: str, documents: Sequence[dict[str, Any]]) -> int:
        result = await self._db[collection].insert_many(list(documents), ordered=True)
        return len(result.inserted_ids)

    async def close(self) -> None:
        await self._client.close()
