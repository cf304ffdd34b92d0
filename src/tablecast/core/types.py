"""Type aliases used across TableCast."""

from __future__ import annotations

from typing import Any, Callable

RawValue = Any
RawRecord = dict[str, RawValue]
Setter = Callable[[Any, Any], None]
