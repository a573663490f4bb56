"""ObservationSink protocol - receives per-document decode outcomes from watchers."""

from __future__ import annotations

from typing import Any, Protocol

from omni_events.errors import DecodeError


class ObservationSink(Protocol):
    """Receives what a collection watcher decodes."""

    def on_decoded(self, collection: str, value: Any) -> None:
        """A full document decoded into its event type."""
        ...

    def on_failure(self, collection: str, error: DecodeError, document: dict[str, Any]) -> None:
        """A full document did not match the event schema."""
        ...

    def on_closed(self, collection: str, error: BaseException | None) -> None:
        """The watch loop ended: feed exhausted (error is None) or transport failure."""
        ...
