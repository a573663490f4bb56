"""ChangeFeed protocol - live change notifications for one collection."""

from __future__ import annotations

from typing import AsyncIterator, Protocol

from omni_events.models.records import ChangeNotification


class ChangeFeed(Protocol):
    """A subscription to one collection's change stream.

    Used as ``async with feed.open() as notifications: async for n in notifications``.
    Transport failures surface as exceptions from ``open()`` or from iteration.
    """

    def open(self) -> ChangeFeedSession:
        """Connect and return a session yielding notifications until closed."""
        ...


class ChangeFeedSession(Protocol):
    async def __aenter__(self) -> AsyncIterator[ChangeNotification]:
        ...

    async def __aexit__(self, exc_type, exc, tb) -> bool | None:
        ...
