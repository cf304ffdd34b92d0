"""Decode JSON config tables into typed pydantic records."""

from __future__ import annotations

from typing import TypeVar

from tablecast.core.config import DecodeSettings
from tablecast.core.exceptions import (
    CoercionError,
    DecodeFailedError,
    MalformedBatchError,
    TableCastError,
    UnknownExtensionError,
    UnsupportedTypeError,
)
from tablecast.decoding.coercer import coerce
from tablecast.decoding.decoder import RecordDecoder, decode
from tablecast.decoding.selector import select
from tablecast.models.diagnostics import DecodeResult, Diagnostic, DiagnosticsCollector, FailureKind
from tablecast.models.markers import (
    Byte,
    ConfigRecord,
    Double,
    FieldName,
    Float,
    IndexPK,
    Int,
    Long,
    Short,
)
from tablecast.parsers.json_parser import JSONDataParser
from tablecast.parsers.registry import ParserRegistry, create_registry

T = TypeVar("T")


def parse(text: str, target_type: type[T]) -> list[T]:
    """Decode a JSON array of rows into ``target_type`` records."""
    return JSONDataParser().parse(text, target_type)


__all__ = [
    "Byte",
    "CoercionError",
    "ConfigRecord",
    "DecodeFailedError",
    "DecodeResult",
    "DecodeSettings",
    "Diagnostic",
    "DiagnosticsCollector",
    "Double",
    "FailureKind",
    "FieldName",
    "Float",
    "IndexPK",
    "Int",
    "JSONDataParser",
    "Long",
    "MalformedBatchError",
    "ParserRegistry",
    "RecordDecoder",
    "Short",
    "TableCastError",
    "UnknownExtensionError",
    "UnsupportedTypeError",
    "coerce",
    "create_registry",
    "decode",
    "parse",
    "select",
]
