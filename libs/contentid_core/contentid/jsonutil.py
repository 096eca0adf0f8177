from __future__ import annotations

import json
import math
import orjson
from typing import Any, Mapping, Tuple

from .errors import EncodingFailure

_I64_MIN = -(1 << 63)
_U64_MAX = (1 << 64) - 1


def _key(k: Any) -> str:
    # Scalar keys become their JSON text, as the reference encoder writes them
    if isinstance(k, str):
        return k
    if isinstance(k, bool):
        return "true" if k else "false"
    if isinstance(k, int):
        return str(k)
    raise EncodingFailure(detail=f"unsupported key type {type(k).__name__}")


def _prepare(obj: Any, wide: list) -> Any:
    """Stringify scalar keys, reject non-finite floats, flag ints beyond 64 bits."""
    if isinstance(obj, Mapping):
        out = {}
        for k, v in obj.items():
            sk = _key(k)
            if sk in out:
                raise EncodingFailure(detail=f"duplicate key {sk!r}")
            out[sk] = _prepare(v, wide)
        return out
    if isinstance(obj, (list, tuple)):
        return [_prepare(x, wide) for x in obj]
    if isinstance(obj, float) and not math.isfinite(obj):
        raise EncodingFailure(detail=f"non-finite float {obj!r}")
    if isinstance(obj, int) and not isinstance(obj, bool) and not _I64_MIN <= obj <= _U64_MAX:
        wide.append(obj)
    return obj


def canonical_json_bytes(obj: Mapping[Any, Any]) -> bytes:
    """Return deterministic compact JSON bytes for a record (sorted keys, no newline).

    The byte layout is part of every structured CID: ``{"key": "value"}`` must
    encode as ``{"key":"value"}``. Unserializable content raises EncodingFailure.
    Records holding integers orjson cannot write go through the json module.
    """
    wide: list = []
    prepared = _prepare(obj, wide)
    if wide:
        try:
            return json.dumps(
                prepared, separators=(",", ":"), sort_keys=True, ensure_ascii=False, allow_nan=False
            ).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise EncodingFailure(detail=str(e)) from e
    try:
        return orjson.dumps(prepared, option=orjson.OPT_SORT_KEYS)
    except orjson.JSONEncodeError as e:
        raise EncodingFailure(detail=str(e)) from e


def try_parse_json(text: str | bytes) -> Tuple[Any | None, str | None]:
    """Parse JSON text or UTF-8 bytes, returning (obj, None) on success, or (None, error) on failure."""
    try:
        return orjson.loads(text), None
    except orjson.JSONDecodeError as e:
        return None, str(e)
