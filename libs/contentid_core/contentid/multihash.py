# path: libs/contentid_core/contentid/multihash.py
"""Multihash envelope: <varint code><varint length><digest>.

Codes come from the multicodec table. Everything wired today is below 0x80,
so code and length are single bytes; the blake2 codes need three.
"""
from __future__ import annotations

from typing import Dict, Optional, Tuple

from .digest import Digest, HashAlgorithm
from .errors import MalformedCid

CODES: Dict[HashAlgorithm, int] = {
    HashAlgorithm.SHA1: 0x11,
    HashAlgorithm.SHA2_256: 0x12,
    HashAlgorithm.SHA2_512: 0x13,
    HashAlgorithm.SHA3: 0x14,       # sha3-512
    HashAlgorithm.BLAKE3: 0x1E,
    HashAlgorithm.BLAKE2B: 0xB240,  # blake2b-512
    HashAlgorithm.BLAKE2S: 0xB260,  # blake2s-256
}

_BY_CODE: Dict[int, HashAlgorithm] = {c: a for a, c in CODES.items()}


def varint(n: int) -> bytes:
    """Unsigned LEB128."""
    if n < 0:
        raise ValueError("varint must be non-negative")
    out = bytearray()
    while True:
        b = n & 0x7F
        n >>= 7
        if n:
            out.append(b | 0x80)
        else:
            out.append(b)
            return bytes(out)


def read_varint(buf: bytes, offset: int = 0) -> Tuple[int, int]:
    """Return (value, next_offset)."""
    value = 0
    shift = 0
    i = offset
    while i < len(buf):
        b = buf[i]
        value |= (b & 0x7F) << shift
        i += 1
        if not b & 0x80:
            return value, i
        shift += 7
    raise MalformedCid("truncated varint")


def code_for(algorithm: HashAlgorithm | str) -> int:
    return CODES[HashAlgorithm(algorithm)]


def algorithm_for_code(code: int) -> Optional[HashAlgorithm]:
    return _BY_CODE.get(code)


def encode(algorithm: HashAlgorithm | str, digest: Digest | bytes) -> bytes:
    raw = digest.value if isinstance(digest, Digest) else bytes(digest)
    return varint(code_for(algorithm)) + varint(len(raw)) + raw


def decode(mh: bytes) -> Tuple[int, bytes]:
    """Split a multihash into (code, digest); the declared length must match."""
    code, i = read_varint(mh)
    length, i = read_varint(mh, i)
    body = bytes(mh[i:])
    if len(body) != length:
        raise MalformedCid("multihash length mismatch", detail=f"declared {length}, got {len(body)}")
    return code, body


__all__ = ["CODES", "varint", "read_varint", "code_for", "algorithm_for_code", "encode", "decode"]
