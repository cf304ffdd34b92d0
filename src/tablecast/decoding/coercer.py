"""Type-directed coercion of raw values into declared field types."""

from __future__ import annotations

from typing import Annotated, Any, Callable, Optional, get_args, get_origin

from tablecast.decoding.containers import bind_list, bind_map
from tablecast.decoding.scalars import SCALAR_PARSERS, FieldResult, to_text
from tablecast.models.diagnostics import FailureKind
from tablecast.models.markers import FloatWidth, IntWidth
from tablecast.models.schema import FieldDescriptor, FieldKind

_INT_KINDS_BY_BITS = {8: FieldKind.BYTE, 16: FieldKind.SHORT, 32: FieldKind.INT, 64: FieldKind.LONG}
_FLOAT_KINDS_BY_BITS = {32: FieldKind.FLOAT, 64: FieldKind.DOUBLE}


def _unwrap(annotation: Any, metadata: tuple = ()) -> tuple[Any, tuple]:
    while get_origin(annotation) is Annotated:
        base, *extra = get_args(annotation)
        annotation, metadata = base, (*metadata, *extra)
    return annotation, metadata


def _width(metadata: tuple, marker: type) -> Optional[int]:
    for item in metadata:
        if isinstance(item, marker):
            return item.bits
    return None


def resolve_kind(annotation: Any, metadata: tuple = ()) -> FieldKind:
    """Map a declared annotation (plus pydantic field metadata) to a FieldKind."""
    annotation, metadata = _unwrap(annotation, tuple(metadata))
    if annotation is bool:
        return FieldKind.BOOL
    if annotation is int:
        return _INT_KINDS_BY_BITS.get(_width(metadata, IntWidth) or 64, FieldKind.UNSUPPORTED)
    if annotation is float:
        return _FLOAT_KINDS_BY_BITS.get(_width(metadata, FloatWidth) or 64, FieldKind.UNSUPPORTED)
    if annotation is str:
        return FieldKind.STR
    if annotation is dict or get_origin(annotation) is dict:
        return FieldKind.MAP
    if annotation is list or get_origin(annotation) is list:
        return FieldKind.LIST
    return FieldKind.UNSUPPORTED


def _scalar(kind: FieldKind) -> Callable[[Any], FieldResult]:
    parse = SCALAR_PARSERS[kind]

    def coerce(raw: Any) -> FieldResult:
        try:
            return FieldResult.success(parse(to_text(raw)))
        except (ValueError, OverflowError, RecursionError) as exc:
            return FieldResult.fail(FailureKind.INVALID_VALUE, str(exc))

    return coerce


def _unsupported(annotation: Any) -> Callable[[Any], FieldResult]:
    def coerce(raw: Any) -> FieldResult:
        return FieldResult.fail(
            FailureKind.UNSUPPORTED_TYPE,
            f"not support config data type. type={annotation!r}",
            target=annotation,
        )

    return coerce


def describe(name: str, annotation: Any, metadata: tuple = (), assign: Any = None) -> FieldDescriptor:
    """Build a FieldDescriptor with its coercion function bound up front."""
    kind = resolve_kind(annotation, metadata)
    key_kind = value_kind = None
    if kind is FieldKind.MAP:
        args = get_args(_unwrap(annotation)[0])
        key_ann, value_ann = args if len(args) == 2 else (None, None)
        if args:
            key_kind, value_kind = resolve_kind(key_ann), resolve_kind(value_ann)
        bound = bind_map(key_kind, value_kind, key_ann, value_ann)
    elif kind is FieldKind.LIST:
        args = get_args(_unwrap(annotation)[0])
        element_ann = args[0] if args else None
        if args:
            value_kind = resolve_kind(element_ann)
        bound = bind_list(value_kind, element_ann)
    elif kind is FieldKind.UNSUPPORTED:
        bound = _unsupported(annotation)
    else:
        bound = _scalar(kind)
    return FieldDescriptor(
        name=name,
        kind=kind,
        annotation=annotation,
        key_kind=key_kind,
        value_kind=value_kind,
        coerce=bound,
        assign=assign,
    )


def coerce(raw: Any, descriptor: FieldDescriptor) -> FieldResult:
    """Coerce one raw value into the type ``descriptor`` declares."""
    return descriptor.coerce(raw)
