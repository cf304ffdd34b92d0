"""Scalar parsers, raw-value rendering and the per-field result type."""

from __future__ import annotations

import json
import math
import re
import struct
from dataclasses import dataclass
from decimal import Decimal
from functools import partial
from typing import Any, Callable, Optional

from tablecast.core.exceptions import CoercionError, UnsupportedTypeError
from tablecast.decoding.numeric import normalize_numeric
from tablecast.models.diagnostics import FailureKind
from tablecast.models.schema import FieldKind

_INTEGER_TEXT = re.compile(r"[+-]?[0-9]+")
_DECIMAL_TEXT = re.compile(r"\s*[+-]?(?:NaN|Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)\s*")

_INT_BITS = {FieldKind.BYTE: 8, FieldKind.SHORT: 16, FieldKind.INT: 32, FieldKind.LONG: 64}


def _render_json(raw: Any) -> str:
    """Compact JSON text of a parsed value; Decimal numbers keep their exact digits."""
    if isinstance(raw, dict):
        return "{" + ",".join(
            f"{json.dumps(str(key), ensure_ascii=False)}:{_render_json(value)}" for key, value in raw.items()
        ) + "}"
    if isinstance(raw, list):
        return "[" + ",".join(_render_json(item) for item in raw) + "]"
    if isinstance(raw, Decimal):
        return str(raw)
    return json.dumps(raw, ensure_ascii=False)


def to_text(raw: Any) -> str:
    """Render a parsed JSON value the way it was spelled in the source table."""
    if raw is None:
        return ""
    if isinstance(raw, str):
        return raw
    if isinstance(raw, bool):
        return "true" if raw else "false"
    if isinstance(raw, (dict, list)):
        return _render_json(raw)
    return str(raw)


def parse_integer(text: str, bits: int = 64) -> int:
    if text == "":
        return 0
    digits = normalize_numeric(text)
    if not _INTEGER_TEXT.fullmatch(digits):
        raise ValueError(f"not an integer: {text!r}")
    value = int(digits)
    low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    if not low <= value <= high:
        raise ValueError(f"{value} out of range for {bits}-bit integer")
    return value


def parse_float(text: str, bits: int = 64) -> float:
    if text == "":
        return 0.0
    if not _DECIMAL_TEXT.fullmatch(text):
        raise ValueError(f"not a decimal number: {text!r}")
    value = float(text)
    if bits == 32:
        try:
            value = struct.unpack("<f", struct.pack("<f", value))[0]
        except OverflowError:
            value = math.copysign(math.inf, value)
    return value


def parse_bool(text: str) -> bool:
    """Byte literal first (non-zero is true), then case-insensitive true/false."""
    if _INTEGER_TEXT.fullmatch(text):
        number = int(text)
        if -128 <= number <= 127:
            return number != 0
    lowered = text.lower()
    if lowered == "true":
        return True
    if lowered in ("false", ""):
        return False
    raise ValueError(f"not a boolean: {text!r}")


def parse_str(text: str) -> str:
    return text


SCALAR_PARSERS: dict[FieldKind, Callable[[str], Any]] = {
    **{kind: partial(parse_integer, bits=bits) for kind, bits in _INT_BITS.items()},
    FieldKind.FLOAT: partial(parse_float, bits=32),
    FieldKind.DOUBLE: partial(parse_float, bits=64),
    FieldKind.BOOL: parse_bool,
    FieldKind.STR: parse_str,
}


@dataclass(frozen=True)
class DroppedEntry:
    """A container entry left out of an otherwise successful field."""

    kind: FailureKind
    raw: Any
    message: str


@dataclass(frozen=True)
class FieldResult:
    """Outcome of coercing one raw value: a value, or a named failure."""

    value: Any = None
    failure: Optional[FailureKind] = None
    detail: str = ""
    dropped: tuple[DroppedEntry, ...] = ()
    target: Any = None  # declared annotation, set for UNSUPPORTED_TYPE

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, value: Any, dropped: tuple[DroppedEntry, ...] = ()) -> FieldResult:
        return cls(value=value, dropped=dropped)

    @classmethod
    def fail(cls, kind: FailureKind, detail: str, target: Any = None) -> FieldResult:
        return cls(failure=kind, detail=detail, target=target)

    def unwrap(self) -> Any:
        if self.failure is None:
            return self.value
        if self.failure is FailureKind.UNSUPPORTED_TYPE:
            raise UnsupportedTypeError(self.target, self.detail)
        raise CoercionError(str(self.failure), self.detail)
