"""Type introspection shared by the decoder and encoder.

Schema types are frozen dataclasses. A union of dataclasses that each
declare a ``tag`` class attribute is an externally tagged union; field
metadata (see ``omni_events.models.fields``) renames keys or flattens a
union into its parent document.
"""

from __future__ import annotations

import dataclasses
import functools
import types
import typing
from dataclasses import dataclass
from typing import Any, Callable, Union

NoneType = type(None)

_MISSING = dataclasses.MISSING


@dataclass(frozen=True)
class FieldSpec:
    """How one dataclass field maps onto a document key."""

    name: str
    key: str
    hint: Any  # with Optional[...] stripped
    optional: bool
    flatten: bool
    default: Any = _MISSING
    default_factory: Callable[[], Any] | None = None

    @property
    def has_default(self) -> bool:
        return self.default is not _MISSING or self.default_factory is not None

    def make_default(self) -> Any:
        if self.default_factory is not None:
            return self.default_factory()
        return self.default


def is_union(hint: Any) -> bool:
    return typing.get_origin(hint) in (Union, types.UnionType)


def split_optional(hint: Any) -> tuple[Any, bool]:
    """Strip ``None`` from a union: ``int | None`` -> ``(int, True)``."""
    if not is_union(hint):
        return hint, False
    args = typing.get_args(hint)
    if NoneType not in args:
        return hint, False
    rest = tuple(a for a in args if a is not NoneType)
    if len(rest) == 1:
        return rest[0], True
    return Union[rest], True


def is_tagged_union(hint: Any) -> bool:
    return is_union(hint) and all(
        dataclasses.is_dataclass(member) and isinstance(getattr(member, "tag", None), str)
        for member in typing.get_args(hint)
    )


def is_newtype(hint: Any) -> bool:
    return hasattr(hint, "__supertype__")


@functools.lru_cache(maxsize=None)
def variants(union: Any) -> dict[str, type]:
    """Map tag name -> variant class for a tagged union."""
    return {member.tag: member for member in typing.get_args(union)}


def is_unit_variant(cls: type) -> bool:
    return not dataclasses.fields(cls)


@functools.lru_cache(maxsize=None)
def field_specs(cls: type) -> tuple[FieldSpec, ...]:
    """Describe every dataclass field of ``cls``, ``_id`` first."""
    hints = typing.get_type_hints(cls)
    specs = []
    for f in dataclasses.fields(cls):
        inner, optional = split_optional(hints[f.name])
        specs.append(FieldSpec(
            name=f.name,
            key=f.metadata.get("key", f.name),
            hint=inner,
            optional=optional,
            flatten=bool(f.metadata.get("flatten")),
            default=f.default,
            default_factory=(
                None if f.default_factory is _MISSING else f.default_factory
            ),
        ))
    specs.sort(key=lambda spec: spec.key != "_id")
    return tuple(specs)
