"""Legacy migrator - one-shot rewrite of the legacy events collection."""

from __future__ import annotations

import logging
from typing import Callable

from omni_events.codec import decode, encode
from omni_events.errors import DecodeError, MigrationError
from omni_events.interfaces.prompt import Prompt
from omni_events.interfaces.store import DocumentSink, DocumentSource
from omni_events.migration.convert import convert_legacy_event
from omni_events.models.events import Event
from omni_events.models.legacy import LegacyEvent
from omni_events.models.records import MigrationResult

log = logging.getLogger(__name__)


class LegacyMigrator:
    """Reads every legacy event, converts it, and writes one batch on confirmation.

    All-or-nothing: the whole legacy collection is decoded before anything
    is written, and the first document that fails to decode aborts the run.
    """

    def __init__(
        self,
        source: DocumentSource,
        sink: DocumentSink,
        prompt: Prompt,
        echo: Callable[[str], None] = print,
    ) -> None:
        self._source = source
        self._sink = sink
        self._prompt = prompt
        self._echo = echo

    async def migrate(self, legacy_collection: str) -> MigrationResult:
        log.info("Reading legacy events from %s", legacy_collection)
        documents = await self._source.find_all(legacy_collection)

        legacy_events = [
            self._decode_legacy(index, document)
            for index, document in enumerate(documents)
        ]

        converted: list[Event] = []
        for legacy in legacy_events:
            event = convert_legacy_event(legacy)
            self._echo(f"Old: {legacy!r}")
            self._echo(f"New: {event!r}")
            converted.append(event)

        self._echo(f"Converted {len(converted)} events")
        result = MigrationResult(read=len(documents))
        if not converted:
            self._echo("Nothing to migrate")
            return result

        destination = self._prompt("Destination collection name").strip()
        if not destination:
            return self._abort(result)
        answer = self._prompt(
            f"Insert {len(converted)} events into {destination!r}? [y/n]"
        )
        if answer.strip().lower() != "y":
            return self._abort(result)

        written = await self._sink.insert_many(destination, [encode(e) for e in converted])
        log.info("Inserted %d events into %s", written, destination)
        self._echo(f"Inserted {written} events into {destination}")
        result.written = written
        result.destination = destination
        return result

    def _abort(self, result: MigrationResult) -> MigrationResult:
        self._echo("Migration aborted, nothing written")
        log.info("Migration aborted by operator")
        result.aborted = True
        return result

    @staticmethod
    def _decode_legacy(index: int, document: dict) -> LegacyEvent:
        try:
            return decode(LegacyEvent, document)
        except DecodeError as exc:
            log.error("Legacy document #%d failed to decode: %s", index, exc)
            raise MigrationError(index, document.get("_id"), exc) from exc
