# path: libs/contentid_core/contentid/canonical.py
"""Input classification and canonical bytes.

Inputs are sorted into one of two shapes at a single boundary (`classify`):

* ``Text``: bytes hashed as-is (``str`` is UTF-8 encoded first)
* ``StructuredRecord``: a mapping, serialized to compact sorted-key JSON

Dataclass instances and pydantic models count as records of their own fields.
Anything else is rejected with InvalidDataType.
"""
from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from pydantic import BaseModel

from .errors import InvalidDataType
from .jsonutil import canonical_json_bytes

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Text:
    data: bytes


@dataclass(frozen=True)
class StructuredRecord:
    fields: Mapping[str, Any]


InputValue = Union[Text, StructuredRecord]


def _struct_fields(value: Any) -> Mapping[str, Any] | None:
    # Shallow, like converting a struct to its field map
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if isinstance(value, BaseModel):
        return value.model_dump()
    return None


def classify(value: Any) -> InputValue:
    """Tag a raw value as Text or StructuredRecord, or raise InvalidDataType."""
    if isinstance(value, (Text, StructuredRecord)):
        return value
    if isinstance(value, str):
        return Text(value.encode("utf-8"))
    if isinstance(value, (bytes, bytearray, memoryview)):
        return Text(bytes(value))
    if isinstance(value, Mapping):
        return StructuredRecord(value)
    fields = _struct_fields(value)
    if fields is not None:
        return StructuredRecord(fields)
    _log.debug("rejecting input of type %s", type(value).__name__)
    raise InvalidDataType(detail=type(value).__name__)


def to_bytes(value: InputValue) -> bytes:
    if isinstance(value, Text):
        return value.data
    return canonical_json_bytes(dict(value.fields))


def canonical_bytes(value: Any) -> bytes:
    """classify + to_bytes in one step."""
    return to_bytes(classify(value))


__all__ = ["Text", "StructuredRecord", "InputValue", "classify", "to_bytes", "canonical_bytes"]
