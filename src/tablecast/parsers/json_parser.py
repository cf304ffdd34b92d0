"""JSON config table parser."""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from typing import Any, Optional, TypeVar

from tablecast.core.config import DecodeSettings
from tablecast.core.exceptions import DecodeFailedError, MalformedBatchError
from tablecast.core.protocols import IDiagnosticSink
from tablecast.decoding.decoder import decode
from tablecast.decoding.selector import select
from tablecast.models.diagnostics import DecodeResult

T = TypeVar("T")

logger = logging.getLogger(__name__)


def load_batch(text: str) -> list[Any]:
    """Parse ``text`` as a JSON array; anything else aborts the whole call.

    Floats are kept as Decimal so numbers keep their source spelling.
    """
    try:
        data = json.loads(text, parse_float=Decimal)
    except (json.JSONDecodeError, RecursionError) as exc:
        raise MalformedBatchError(f"invalid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise MalformedBatchError(f"expected a JSON array of records, got {type(data).__name__}")
    return data


class JSONDataParser:
    """IDataParser for ``.json`` tables: an array of objects, one per row."""

    FILE_EXT_NAME = ".json"

    def __init__(self, settings: Optional[DecodeSettings] = None,
                 sink: Optional[IDiagnosticSink] = None) -> None:
        self._settings = settings or DecodeSettings()
        self._sink = sink

    def decode_text(self, text: str, target_type: type[T]) -> DecodeResult:
        schema = select(target_type)
        if not text or not text.strip():
            return DecodeResult(target_type=target_type.__name__)

        result = decode(load_batch(text), schema, target_type, sink=self._sink)
        if self._settings.strict and result.diagnostics:
            raise DecodeFailedError(result)
        return result

    def parse(self, text: str, target_type: type[T]) -> list[T]:
        return self.decode_text(text, target_type).records

    def file_extension_name(self) -> str:
        return self.FILE_EXT_NAME
