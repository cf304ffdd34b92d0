"""Shared test doubles: sample config record types and a list-backed sink."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict

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


class ItemConfig(ConfigRecord):
    """Every supported kind, one field each."""

    id: Annotated[Int, IndexPK()] = 0
    name: Annotated[str, FieldName()] = ""
    level: Annotated[Byte, FieldName()] = 0
    stack: Annotated[Short, FieldName()] = 0
    exp: Annotated[Long, FieldName()] = 0
    weight: Annotated[Float, FieldName()] = 0.0
    price: Annotated[Double, FieldName()] = 0.0
    tradable: Annotated[bool, FieldName()] = False
    attrs: Annotated[dict[int, str], FieldName()] = {}
    drops: Annotated[list[int], FieldName()] = []
    note: str = "unselected"


class RewardConfig(ConfigRecord):
    id: Annotated[int, IndexPK()] = 0
    by_name: Annotated[dict[str, int], FieldName()] = {}
    counts: Annotated[dict[int, int], FieldName()] = {}
    ratios: Annotated[list[float], FieldName()] = []
    tags: Annotated[list[str], FieldName()] = []


class OddConfig(ConfigRecord):
    id: Annotated[int, IndexPK()] = 0
    opened: Annotated[Any, FieldName()] = None
    title: Annotated[str, FieldName()] = ""


class RequiredConfig(ConfigRecord):
    """Cannot be built without arguments, so every row is dropped."""

    id: Annotated[int, IndexPK()]


class FrozenConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Annotated[int, IndexPK()] = 0
    name: Annotated[str, FieldName()] = ""


class ListSink:
    """IDiagnosticSink that keeps everything it is given."""

    def __init__(self) -> None:
        self.items: list[Any] = []

    def add(self, diagnostic: Any) -> None:
        self.items.append(diagnostic)


__all__ = ["FrozenConfig", "ItemConfig", "ListSink", "OddConfig", "RequiredConfig", "RewardConfig"]
