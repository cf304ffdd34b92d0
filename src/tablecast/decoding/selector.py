"""Field selection: which fields of a record type take part in decoding."""

from __future__ import annotations

import logging
from functools import cache

from pydantic import BaseModel

from tablecast.core.types import Setter
from tablecast.decoding.coercer import describe
from tablecast.models.markers import SELECTION_MARKERS
from tablecast.models.schema import RecordSchema

logger = logging.getLogger(__name__)


def _bind_assign(name: str, frozen: bool) -> Setter:
    if not frozen:
        def assign(instance, value):
            setattr(instance, name, value)
        return assign

    # Frozen models reject setattr; write the single field into the instance dict.
    def assign_frozen(instance, value):
        instance.__dict__[name] = value
        instance.__pydantic_fields_set__.add(name)
    return assign_frozen


@cache
def select(target_type: type) -> RecordSchema:
    """Compute the RecordSchema of ``target_type``.

    Only fields carrying ``FieldName`` or ``IndexPK`` in their metadata are
    kept. The result is memoized per type.
    """
    if not (isinstance(target_type, type) and issubclass(target_type, BaseModel)):
        raise TypeError(f"config record type must be a pydantic model, got {target_type!r}")

    frozen = bool(target_type.model_config.get("frozen", False))
    fields = {}
    for name, info in target_type.model_fields.items():
        if not any(isinstance(item, SELECTION_MARKERS) for item in info.metadata):
            continue
        fields[name] = describe(name, info.annotation, tuple(info.metadata), _bind_assign(name, frozen))

    logger.debug("schema for %s: %s", target_type.__name__, ", ".join(fields) or "<no fields>")
    return RecordSchema(target_type=target_type, fields=fields)
