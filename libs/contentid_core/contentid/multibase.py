# path: libs/contentid_core/contentid/multibase.py
"""Multibase text encodings: base32 (lower, unpadded) and base58btc."""
from __future__ import annotations

import base64
import binascii
from enum import Enum
from typing import Any, Tuple

import base58

from .constants import BASE32_PREFIX, BASE58BTC_PREFIX
from .errors import InvalidBase, MalformedCid


class Base(str, Enum):
    BASE32 = "base32"
    BASE58 = "base58"

    @property
    def prefix(self) -> str:
        return _PREFIXES[self]


_PREFIXES = {Base.BASE32: BASE32_PREFIX, Base.BASE58: BASE58BTC_PREFIX}
_BY_PREFIX = {p: b for b, p in _PREFIXES.items()}


def resolve_base(value: Any) -> Base:
    """Map a configured value onto a Base; anything unrecognized is InvalidBase."""
    if isinstance(value, Base):
        return value
    try:
        return Base(value)
    except ValueError:
        raise InvalidBase(detail=repr(value)) from None


def _b32(data: bytes) -> str:
    # base32 lower, no padding
    return base64.b32encode(data).decode("ascii").lower().rstrip("=")


def _unb32(text: str) -> bytes:
    pad = "=" * (-len(text) % 8)
    return base64.b32decode(text.upper() + pad)


def encode(data: bytes, base: Any) -> str:
    b = resolve_base(base)
    if b is Base.BASE32:
        body = _b32(data)
    else:
        body = base58.b58encode(data).decode("ascii")
    return b.prefix + body


def decode(text: str) -> Tuple[Base, bytes]:
    """Split a multibase string into (base, raw bytes)."""
    if not text:
        raise MalformedCid("empty multibase string")
    b = _BY_PREFIX.get(text[0])
    if b is None:
        raise InvalidBase(detail=f"unknown multibase prefix {text[0]!r}")
    body = text[1:]
    try:
        if b is Base.BASE32:
            return b, _unb32(body)
        return b, base58.b58decode(body)
    except (binascii.Error, ValueError) as e:
        raise MalformedCid(f"invalid {b.value} body", detail=str(e)) from e


__all__ = ["Base", "resolve_base", "encode", "decode"]
