"""Dataclass field helpers that carry document-layout hints for the codec."""

from __future__ import annotations

from dataclasses import field
from typing import Any


def document_id() -> Any:
    """The store-assigned ``_id``; unset until the document is persisted."""
    return field(default=None, metadata={"key": "_id"})


def flattened() -> Any:
    """A tagged-union field whose ``{"<Tag>": {...}}`` entry sits in the parent document."""
    return field(metadata={"flatten": True})
