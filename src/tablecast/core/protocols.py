"""Protocol interfaces for pluggable TableCast collaborators.

Parsers and diagnostic sinks are matched structurally, so callers can plug in
their own without inheriting from anything here.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Format parsers
# ---------------------------------------------------------------------------

@runtime_checkable
class IDataParser(Protocol):
    """Turns the text of one config file into decoded records."""

    def parse(self, text: str, target_type: type[T]) -> list[T]: ...

    def file_extension_name(self) -> str: ...


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------

@runtime_checkable
class IDiagnosticSink(Protocol):
    """Receives non-fatal decode failures."""

    def add(self, diagnostic: Any) -> None: ...
