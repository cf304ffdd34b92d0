"""Diagnostics produced by non-fatal decode failures."""

from __future__ import annotations

import logging
from collections import Counter
from enum import StrEnum
from typing import Any, Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class FailureKind(StrEnum):
    MISSING_FIELD = "MISSING_FIELD"
    INVALID_VALUE = "INVALID_VALUE"
    UNSUPPORTED_TYPE = "UNSUPPORTED_TYPE"
    UNSUPPORTED_KEY = "UNSUPPORTED_KEY"
    UNSUPPORTED_VALUE = "UNSUPPORTED_VALUE"
    UNSUPPORTED_ELEMENT = "UNSUPPORTED_ELEMENT"
    ALLOCATION_FAILED = "ALLOCATION_FAILED"
    INVALID_RECORD = "INVALID_RECORD"


class Tier(StrEnum):
    RECORD = "RECORD"  # record dropped from the batch
    FIELD = "FIELD"  # field left at its default


class Diagnostic(BaseModel):
    """A single non-fatal failure, located by type, record and field."""

    tier: Tier
    kind: FailureKind
    target_type: str
    record_index: int
    field_name: Optional[str] = None
    raw_value: Any = None
    message: str = ""

    def __str__(self) -> str:
        parts = [f"class={self.target_type}", f"record={self.record_index}"]
        if self.field_name is not None:
            parts.append(f"fieldName={self.field_name}")
        if self.raw_value is not None:
            parts.append(f"value={self.raw_value!r}")
        return f"{self.kind}: {self.message} ({' '.join(parts)})"


class DiagnosticsCollector:
    """Accumulates diagnostics for one decode call and logs each as it arrives."""

    def __init__(self, forward_to: Any = None) -> None:
        self._items: list[Diagnostic] = []
        self._forward_to = forward_to

    def add(self, diagnostic: Diagnostic) -> None:
        self._items.append(diagnostic)
        if self._forward_to is not None:
            self._forward_to.add(diagnostic)
        if diagnostic.kind is FailureKind.MISSING_FIELD:
            logger.warning("%s", diagnostic)
        else:
            logger.error("%s", diagnostic)

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return list(self._items)

    def count_by_kind(self) -> dict[FailureKind, int]:
        return dict(Counter(d.kind for d in self._items))

    def __len__(self) -> int:
        return len(self._items)


class DecodeResult(BaseModel):
    """Decoded records of one batch together with what went wrong."""

    target_type: str
    records: list[Any] = Field(default_factory=list)
    diagnostics: list[Diagnostic] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.diagnostics
