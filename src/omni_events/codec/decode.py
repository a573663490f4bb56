"""Decode untyped documents into schema values."""

from __future__ import annotations

import dataclasses
import typing
from collections.abc import Mapping
from enum import Enum
from typing import Any, TypeVar

from bson import ObjectId

from omni_events.codec import schema
from omni_events.errors import DecodeError
from omni_events.models.chain import U128_MAX, OmniAddress, U128, address_chain

T = TypeVar("T")


def decode(target: Any, document: Any, path: str = "$") -> Any:
    """Decode ``document`` as ``target``.

    ``target`` is a schema dataclass or a tagged-union alias such as
    ``TransferOrigin``. Unknown keys are ignored; absent optional fields
    decode to None (or the field default). Raises DecodeError naming the
    first field or variant that does not match.
    """
    return _decode_value(target, document, path)


def _decode_value(hint: Any, value: Any, path: str) -> Any:
    hint, optional = schema.split_optional(hint)
    if value is None:
        if optional:
            return None
        raise DecodeError(path, "expected a value, got null")

    if schema.is_tagged_union(hint):
        return _decode_tagged(hint, value, path)
    if dataclasses.is_dataclass(hint):
        return _decode_dataclass(hint, value, path)
    if hint is U128:
        return _decode_u128(value, path)
    if hint is OmniAddress:
        return _decode_address(value, path)
    if schema.is_newtype(hint):
        return _decode_value(hint.__supertype__, value, path)
    if isinstance(hint, type) and issubclass(hint, Enum):
        return _decode_enum(hint, value, path)
    if typing.get_origin(hint) is list:
        return _decode_list(typing.get_args(hint)[0], value, path)
    if hint is ObjectId:
        return _decode_object_id(value, path)
    if hint is bool:
        if not isinstance(value, bool):
            raise DecodeError(path, f"expected a boolean, got {_kind(value)}")
        return value
    if hint is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise DecodeError(path, f"expected an integer, got {_kind(value)}")
        return int(value)
    if hint is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise DecodeError(path, f"expected a number, got {_kind(value)}")
        return float(value)
    if hint is str:
        if not isinstance(value, str):
            raise DecodeError(path, f"expected a string, got {_kind(value)}")
        return value
    raise TypeError(f"{path}: unsupported schema type {hint!r}")


def _decode_dataclass(cls: type[T], value: Any, path: str) -> T:
    if not isinstance(value, Mapping):
        raise DecodeError(path, f"expected a document for {cls.__name__}, got {_kind(value)}")

    kwargs = {}
    for spec in schema.field_specs(cls):
        if spec.flatten:
            kwargs[spec.name] = _decode_flattened(spec.hint, value, path)
            continue

        field_path = f"{path}.{spec.key}"
        raw = value.get(spec.key)
        if raw is None:
            if spec.has_default:
                kwargs[spec.name] = spec.make_default()
            elif spec.optional:
                kwargs[spec.name] = None
            elif spec.key in value:
                raise DecodeError(field_path, "expected a value, got null")
            else:
                raise DecodeError(field_path, "missing field")
            continue
        kwargs[spec.name] = _decode_value(spec.hint, raw, field_path)
    return cls(**kwargs)


def _decode_tagged(union: Any, value: Any, path: str) -> Any:
    known = schema.variants(union)

    if isinstance(value, str):
        cls = _variant(known, value, path)
        if not schema.is_unit_variant(cls):
            raise DecodeError(path, f"variant {value!r} requires a body")
        return cls()

    if not isinstance(value, Mapping):
        raise DecodeError(path, f"expected a tagged variant, got {_kind(value)}")
    if len(value) != 1:
        raise DecodeError(
            path, f"expected exactly one variant tag, got {sorted(value)!r}"
        )

    (tag, body), = value.items()
    cls = _variant(known, tag, path)
    if schema.is_unit_variant(cls) and body is None:
        return cls()
    return _decode_dataclass(cls, body, f"{path}.{tag}")


def _decode_flattened(union: Any, document: Mapping, path: str) -> Any:
    known = schema.variants(union)
    present = [tag for tag in known if tag in document]
    if len(present) != 1:
        expected = " or ".join(repr(t) for t in known)
        if present:
            raise DecodeError(path, f"expected one of {expected}, found {present!r}")
        raise DecodeError(path, f"expected one of {expected}")
    tag = present[0]
    return _decode_dataclass(known[tag], document[tag], f"{path}.{tag}")


def _variant(known: dict[str, type], tag: Any, path: str) -> type:
    try:
        return known[tag]
    except (KeyError, TypeError):
        expected = ", ".join(known)
        raise DecodeError(path, f"unknown variant {tag!r}, expected one of {expected}") from None


def _decode_u128(value: Any, path: str) -> int:
    if isinstance(value, bool):
        raise DecodeError(path, "expected an amount, got bool")
    if isinstance(value, str):
        # str.isdigit() also admits non-ASCII digits such as "²" and "١".
        if not (value.isascii() and value.isdigit()):
            raise DecodeError(path, f"invalid amount {value!r}")
        try:
            amount = int(value)
        except ValueError as exc:
            raise DecodeError(path, f"invalid amount: {exc}") from None
    elif isinstance(value, int):
        amount = int(value)
    else:
        raise DecodeError(path, f"expected an amount, got {_kind(value)}")
    if not 0 <= amount <= U128_MAX:
        raise DecodeError(path, f"amount {amount} out of u128 range")
    return amount


def _decode_address(value: Any, path: str) -> str:
    if not isinstance(value, str):
        raise DecodeError(path, f"expected an address, got {_kind(value)}")
    try:
        address_chain(value)
    except ValueError as exc:
        raise DecodeError(path, str(exc)) from None
    return value


def _decode_enum(cls: type[Enum], value: Any, path: str) -> Enum:
    try:
        return cls(value)
    except ValueError:
        expected = ", ".join(str(m.value) for m in cls)
        raise DecodeError(path, f"unknown {cls.__name__} {value!r}, expected one of {expected}") from None


def _decode_list(item_hint: Any, value: Any, path: str) -> list:
    if not isinstance(value, (list, tuple)):
        raise DecodeError(path, f"expected an array, got {_kind(value)}")
    return [_decode_value(item_hint, item, f"{path}[{i}]") for i, item in enumerate(value)]


def _decode_object_id(value: Any, path: str) -> ObjectId:
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    raise DecodeError(path, f"expected an ObjectId, got {_kind(value)}")


def _kind(value: Any) -> str:
    return type(value).__name__
