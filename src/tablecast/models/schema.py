"""Field descriptors and record schemas."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional


class FieldKind(StrEnum):
    BYTE = "BYTE"
    SHORT = "SHORT"
    INT = "INT"
    LONG = "LONG"
    FLOAT = "FLOAT"
    DOUBLE = "DOUBLE"
    BOOL = "BOOL"
    STR = "STR"
    MAP = "MAP"
    LIST = "LIST"
    UNSUPPORTED = "UNSUPPORTED"


INTEGER_KINDS = frozenset({FieldKind.BYTE, FieldKind.SHORT, FieldKind.INT, FieldKind.LONG})


@dataclass(frozen=True)
class FieldDescriptor:
    """One selected field of a record type.

    ``coerce`` and ``assign`` are bound once when the schema is built so the
    per-record path never inspects annotations again.
    """

    name: str
    kind: FieldKind
    annotation: Any
    key_kind: Optional[FieldKind] = None  # MAP only
    value_kind: Optional[FieldKind] = None  # MAP value or LIST element
    coerce: Callable[[Any], Any] = field(default=None, repr=False, compare=False)  # type: ignore[assignment]
    assign: Callable[[Any, Any], None] = field(default=None, repr=False, compare=False)  # type: ignore[assignment]


@dataclass(frozen=True)
class RecordSchema:
    """Selected fields of one target record type, in declaration order."""

    target_type: type
    fields: Mapping[str, FieldDescriptor]

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def __contains__(self, name: object) -> bool:
        return name in self.fields

    def __getitem__(self, name: str) -> FieldDescriptor:
        return self.fields[name]
