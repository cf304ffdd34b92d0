"""Batch decoding: raw records in, typed config records out."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Optional

from tablecast.core.protocols import IDiagnosticSink
from tablecast.core.types import RawRecord
from tablecast.models.diagnostics import (
    DecodeResult,
    Diagnostic,
    DiagnosticsCollector,
    FailureKind,
    Tier,
)
from tablecast.models.schema import FieldDescriptor, RecordSchema

logger = logging.getLogger(__name__)


class RecordDecoder:
    """Decodes one batch of raw records against a precomputed schema.

    Failures below the batch level never raise: a record that cannot be
    allocated is dropped, a field that cannot be coerced keeps its default,
    and both leave a Diagnostic behind.
    """

    def __init__(self, schema: RecordSchema, target_type: Optional[type] = None,
                 sink: Optional[IDiagnosticSink] = None) -> None:
        self._schema = schema
        self._target_type = target_type or schema.target_type
        self._type_name = self._target_type.__name__
        self._sink = sink

    def decode(self, raw_records: Sequence[Any]) -> DecodeResult:
        collector = DiagnosticsCollector(forward_to=self._sink)
        records: list[Any] = []
        for index, raw in enumerate(raw_records):
            instance = self._decode_record(index, raw, collector)
            if instance is not None:
                records.append(instance)

        logger.debug(
            "decoded %d/%d %s record(s), %d diagnostic(s)",
            len(records), len(raw_records), self._type_name, len(collector),
        )
        return DecodeResult(
            target_type=self._type_name,
            records=records,
            diagnostics=collector.diagnostics,
        )

    def _decode_record(self, index: int, raw: Any, collector: DiagnosticsCollector) -> Any:
        if not isinstance(raw, Mapping):
            collector.add(self._diagnostic(
                Tier.RECORD, FailureKind.INVALID_RECORD, index,
                raw_value=raw, message="record is not a JSON object",
            ))
            return None
        try:
            instance = self._target_type()
        except Exception as exc:
            collector.add(self._diagnostic(
                Tier.RECORD, FailureKind.ALLOCATION_FAILED, index,
                raw_value=raw, message=f"cannot create instance: {exc}",
            ))
            return None

        for descriptor in self._schema.fields.values():
            self._decode_field(index, instance, raw, descriptor, collector)
        return instance

    def _decode_field(self, index: int, instance: Any, raw: RawRecord,
                      descriptor: FieldDescriptor, collector: DiagnosticsCollector) -> None:
        name = descriptor.name
        value = raw.get(name)
        if value is None:
            collector.add(self._diagnostic(
                Tier.FIELD, FailureKind.MISSING_FIELD, index, name,
                message="field not found in source record",
            ))
            return

        result = descriptor.coerce(value)
        if not result.ok:
            collector.add(self._diagnostic(
                Tier.FIELD, result.failure, index, name, raw_value=value, message=result.detail,
            ))
            return
        for entry in result.dropped:
            collector.add(self._diagnostic(
                Tier.FIELD, entry.kind, index, name, raw_value=entry.raw, message=entry.message,
            ))

        try:
            descriptor.assign(instance, result.value)
        except (ValueError, TypeError, AttributeError) as exc:
            collector.add(self._diagnostic(
                Tier.FIELD, FailureKind.INVALID_VALUE, index, name,
                raw_value=value, message=f"assignment rejected: {exc}",
            ))

    def _diagnostic(self, tier: Tier, kind: FailureKind, index: int,
                    field_name: Optional[str] = None, *, raw_value: Any = None,
                    message: str = "") -> Diagnostic:
        return Diagnostic(
            tier=tier,
            kind=kind,
            target_type=self._type_name,
            record_index=index,
            field_name=field_name,
            raw_value=raw_value,
            message=message,
        )


def decode(raw_records: Sequence[Any], schema: RecordSchema, target_type: Optional[type] = None,
           *, sink: Optional[IDiagnosticSink] = None) -> DecodeResult:
    """Decode ``raw_records`` into instances of ``target_type`` (default: the schema's type)."""
    return RecordDecoder(schema, target_type, sink=sink).decode(raw_records)
