"""Collection watcher - decodes full documents from a change feed as they arrive."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Sequence

from omni_events.codec import decode
from omni_events.errors import DecodeError
from omni_events.interfaces.feed import ChangeFeed
from omni_events.interfaces.sink import ObservationSink
from omni_events.models.records import ChangeNotification, WatcherState, WatchReport

log = logging.getLogger(__name__)


class CollectionWatcher:
    """Watches one collection and decodes every full document into ``target``.

    A document that fails to decode is reported to the sink and the loop
    continues. Only a failure of the feed itself (connect or iteration)
    ends the run; that is reported through ``sink.on_closed``.
    """

    def __init__(
        self,
        collection: str,
        target: Any,
        feed: ChangeFeed,
        sink: ObservationSink,
        stop_event: asyncio.Event | None = None,
    ) -> None:
        self.collection = collection
        self._target = target
        self._feed = feed
        self._sink = sink
        self._stop_event = stop_event
        self._state = WatcherState.CONNECTING

    @property
    def state(self) -> WatcherState:
        return self._state

    async def run(self) -> WatchReport:
        """Consume the feed until it closes or fails."""
        report = WatchReport(collection=self.collection)
        error: BaseException | None = None
        self._state = WatcherState.CONNECTING
        log.info("Watching %s as %s", self.collection, _target_name(self._target))

        try:
            async with self._feed.open() as notifications:
                self._state = WatcherState.STREAMING
                async for notification in notifications:
                    if self._stop_event is not None and self._stop_event.is_set():
                        log.info("Stop requested, closing watcher for %s", self.collection)
                        break
                    self._handle(notification, report)
        except Exception as exc:
            error = exc
            report.error = str(exc)
            log.error("Change feed for %s failed: %s", self.collection, exc)
        finally:
            self._state = WatcherState.CLOSED

        log.info(
            "Watcher for %s closed: %d decoded, %d failed, %d skipped",
            self.collection, report.decoded, report.failed, report.skipped,
        )
        self._sink.on_closed(self.collection, error)
        return report

    def _handle(self, notification: ChangeNotification, report: WatchReport) -> None:
        document = notification.full_document
        if document is None:
            report.skipped += 1
            log.debug(
                "Skipping %s on %s: no full document",
                notification.operation_type, self.collection,
            )
            return

        self._state = WatcherState.DECODING
        try:
            value = decode(self._target, document)
        except DecodeError as exc:
            report.failed += 1
            log.debug("Decode failed on %s at %s", self.collection, exc.path)
            self._emit(self._sink.on_failure, self.collection, exc, document)
        else:
            report.decoded += 1
            self._emit(self._sink.on_decoded, self.collection, value)
        self._state = WatcherState.STREAMING

    def _emit(self, callback: Callable[..., None], *args: Any) -> None:
        self._state = WatcherState.EMITTING
        try:
            callback(*args)
        except Exception as exc:
            log.error("Observation sink failed on %s: %s", self.collection, exc, exc_info=True)


async def watch_collections(watchers: Sequence[CollectionWatcher]) -> list[WatchReport]:
    """Run watchers concurrently; one failing never stops the others."""
    results = await asyncio.gather(
        *(watcher.run() for watcher in watchers), return_exceptions=True,
    )

    reports: list[WatchReport] = []
    for watcher, result in zip(watchers, results):
        if isinstance(result, BaseException):
            log.error("Watcher for %s crashed: %s", watcher.collection, result)
            reports.append(WatchReport(collection=watcher.collection, error=str(result)))
        else:
            reports.append(result)
    return reports


def _target_name(target: Any) -> str:
    return getattr(target, "__name__", None) or str(target)
