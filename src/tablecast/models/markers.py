"""Selection markers and width aliases for config record types.

A config record is a pydantic model whose participating fields carry a
selection marker in their ``Annotated`` metadata::

    class ItemConfig(ConfigRecord):
        id: Annotated[Int, IndexPK()] = 0
        name: Annotated[str, FieldName()] = ""
        price: Annotated[Double, FieldName()] = 0.0
        note: str = ""  # not selected, never read or written

The width aliases (``Byte``, ``Short``, ...) pin the destination numeric kind
for fields whose source tables were authored against fixed-width types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

from pydantic import BaseModel, ConfigDict


@dataclass(frozen=True)
class FieldName:
    """General selection marker."""


@dataclass(frozen=True)
class IndexPK:
    """Primary-key selection marker."""


SELECTION_MARKERS: tuple[type, ...] = (FieldName, IndexPK)


@dataclass(frozen=True)
class IntWidth:
    bits: int


@dataclass(frozen=True)
class FloatWidth:
    bits: int


Byte = Annotated[int, IntWidth(8)]
Short = Annotated[int, IntWidth(16)]
Int = Annotated[int, IntWidth(32)]
Long = Annotated[int, IntWidth(64)]
Float = Annotated[float, FloatWidth(32)]
Double = Annotated[float, FloatWidth(64)]


class ConfigRecord(BaseModel):
    """Base class for one row of a static config table."""

    model_config = ConfigDict(extra="ignore", validate_assignment=False)
