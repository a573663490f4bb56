"""Encode schema values into store documents."""

from __future__ import annotations

import dataclasses
import typing
from enum import Enum
from typing import Any

from omni_events.codec import schema
from omni_events.models.chain import U128


def encode(value: Any) -> Any:
    """Encode a schema dataclass into a document, or a variant into its tagged form.

    Optional fields that are None are omitted, as are union values whose
    variant is marked ``omit_on_write`` (unset enrichment data).
    """
    if not dataclasses.is_dataclass(value) or isinstance(value, type):
        raise TypeError(f"expected a schema dataclass, got {type(value).__name__}")
    if isinstance(getattr(value, "tag", None), str):
        return _encode_variant(value)
    return _encode_fields(value)


def _encode_fields(value: Any) -> dict[str, Any]:
    document: dict[str, Any] = {}
    for spec in schema.field_specs(type(value)):
        item = getattr(value, spec.name)
        if item is None or getattr(item, "omit_on_write", False):
            continue
        if spec.flatten:
            document[item.tag] = _encode_fields(item)
            continue
        document[spec.key] = _encode_value(spec.hint, item)
    return document


def _encode_variant(value: Any) -> Any:
    if schema.is_unit_variant(type(value)):
        return value.tag
    return {value.tag: _encode_fields(value)}


def _encode_value(hint: Any, value: Any) -> Any:
    if value is None:
        return None
    hint, _ = schema.split_optional(hint)
    if schema.is_tagged_union(hint):
        return _encode_variant(value)
    if dataclasses.is_dataclass(value):
        return _encode_fields(value)
    if hint is U128:
        return str(value)
    if isinstance(value, Enum):
        return value.value
    if typing.get_origin(hint) is list:
        (item_hint,) = typing.get_args(hint)
        return [_encode_value(item_hint, item) for item in value]
    return value
