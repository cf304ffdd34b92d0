"""TableCast exception hierarchy."""

from __future__ import annotations

from typing import Any


class TableCastError(Exception):
    """Base exception for all TableCast errors."""


class MalformedBatchError(TableCastError):
    """Input text is not a well-formed array of records."""


class CoercionError(TableCastError):
    """A raw value could not be coerced into its destination type."""

    def __init__(self, kind: str, message: str) -> None:
        self.kind = kind
        super().__init__(message)


class UnsupportedTypeError(CoercionError):
    """Destination type matches none of the supported kinds."""

    def __init__(self, target: Any, message: str = "") -> None:
        self.target = target
        super().__init__("UNSUPPORTED_TYPE", message or f"unsupported config data type: {target!r}")


class DecodeFailedError(TableCastError):
    """Strict decode produced diagnostics."""

    def __init__(self, result: Any) -> None:
        self.result = result
        super().__init__(
            f"decode of {result.target_type} produced {len(result.diagnostics)} diagnostic(s)"
        )


class UnknownExtensionError(TableCastError):
    """No parser is registered for a file extension."""
