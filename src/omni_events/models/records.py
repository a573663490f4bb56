"""Operation records: change notifications and run reports."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class ChangeNotification:
    """One entry of a collection change feed.

    ``full_document`` is None when the change carried no post-change
    snapshot (deletes, updates without lookup).
    """

    operation_type: str
    full_document: dict[str, Any] | None = None


class WatcherState(str, Enum):
    CONNECTING = "connecting"
    STREAMING = "streaming"
    DECODING = "decoding"
    EMITTING = "emitting"
    CLOSED = "closed"


@dataclass
class WatchReport:
    """Summary of one collection watcher run."""

    collection: str
    decoded: int = 0
    failed: int = 0
    skipped: int = 0  # notifications without a full document
    error: str | None = None  # transport error that closed the feed


@dataclass
class MigrationResult:
    """Outcome of a legacy migration run."""

    read: int
    written: int = 0
    destination: str | None = None
    aborted: bool = False
