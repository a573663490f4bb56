"""DocumentSource / DocumentSink protocols - the document store boundary."""

from __future__ import annotations

from typing import Any, Protocol, Sequence


class DocumentSource(Protocol):
    """A queryable set of collections."""

    async def find_all(self, collection: str) -> list[dict[str, Any]]:
        """Full scan of ``collection`` in natural order."""
        ...


class DocumentSink(Protocol):
    """Accepts batch writes into named collections."""

    async def insert_many(self, collection: str, documents: Sequence[dict[str, Any]]) -> int:
        """Insert all ``documents`` in one ordered batch. Returns the inserted count."""
        ...
