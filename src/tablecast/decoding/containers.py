"""Coercers for map and list destination fields.

Key and element parsers are chosen once, when the field is described. Entries
whose declared key/value/element type is unsupported are dropped and reported
through ``FieldResult.dropped``; unparsable text under a supported type fails
the whole field.
"""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any, Callable, Optional

from tablecast.decoding.scalars import SCALAR_PARSERS, DroppedEntry, FieldResult, to_text
from tablecast.models.diagnostics import FailureKind
from tablecast.models.schema import INTEGER_KINDS, FieldKind

ELEMENT_KINDS = INTEGER_KINDS | {FieldKind.STR}


def _element_parser(kind: Optional[FieldKind], allowed: frozenset) -> Optional[Callable[[str], Any]]:
    if kind not in allowed:
        return None
    return SCALAR_PARSERS[kind]


def _reparse(raw: Any, expected: type) -> Any:
    """Return the untyped container behind ``raw``, reparsing JSON text if needed."""
    if isinstance(raw, expected):
        return raw
    text = to_text(raw)
    if text == "":
        return expected()
    try:
        data = json.loads(text, parse_float=Decimal)
    except RecursionError as exc:
        raise ValueError(f"JSON nested too deeply: {exc}") from exc
    if not isinstance(data, expected):
        raise ValueError(f"expected a JSON {'object' if expected is dict else 'array'}: {text!r}")
    return data


def bind_map(
    key_kind: Optional[FieldKind],
    value_kind: Optional[FieldKind],
    key_annotation: Any = None,
    value_annotation: Any = None,
) -> Callable[[Any], FieldResult]:
    parse_key = _element_parser(key_kind, INTEGER_KINDS)
    parse_value = _element_parser(value_kind, ELEMENT_KINDS)

    def coerce(raw: Any) -> FieldResult:
        try:
            entries = _reparse(raw, dict)
            result: dict[Any, Any] = {}
            dropped: list[DroppedEntry] = []
            for key, value in entries.items():
                if parse_key is None:
                    dropped.append(DroppedEntry(
                        FailureKind.UNSUPPORTED_KEY, {key: value},
                        f"unsupported map key type {key_annotation!r}",
                    ))
                    continue
                if parse_value is None:
                    dropped.append(DroppedEntry(
                        FailureKind.UNSUPPORTED_VALUE, {key: value},
                        f"unsupported map value type {value_annotation!r}",
                    ))
                    continue
                result[parse_key(to_text(key))] = parse_value(to_text(value))
        except ValueError as exc:
            return FieldResult.fail(FailureKind.INVALID_VALUE, str(exc))
        return FieldResult.success(result, tuple(dropped))

    return coerce


def bind_list(
    element_kind: Optional[FieldKind],
    element_annotation: Any = None,
) -> Callable[[Any], FieldResult]:
    parse_element = _element_parser(element_kind, ELEMENT_KINDS)

    def coerce(raw: Any) -> FieldResult:
        try:
            items = _reparse(raw, list)
            result: list[Any] = []
            dropped: list[DroppedEntry] = []
            for item in items:
                if parse_element is None:
                    dropped.append(DroppedEntry(
                        FailureKind.UNSUPPORTED_ELEMENT, item,
                        f"unsupported list element type {element_annotation!r}",
                    ))
                    continue
                result.append(parse_element(to_text(item)))
        except ValueError as exc:
            return FieldResult.fail(FailureKind.INVALID_VALUE, str(exc))
        return FieldResult.success(result, tuple(dropped))

    return coerce
