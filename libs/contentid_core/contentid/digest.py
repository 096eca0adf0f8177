# path: libs/contentid_core/contentid/digest.py
"""Digest engine: single-shot hashing for the algorithms a CID may name.

Every `HashAlgorithm` member is a valid request, but only the ones registered
in `_DIGESTS` produce a digest. The rest raise UnknownHashType.
"""
from __future__ import annotations

import hashlib
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List

from blake3 import blake3

from .errors import UnknownHashType


class HashAlgorithm(str, Enum):
    SHA1 = "sha1"
    SHA2_256 = "sha2-256"
    SHA2_512 = "sha2-512"
    SHA3 = "sha3"          # sha3-512
    BLAKE2B = "blake2b"    # blake2b-512
    BLAKE2S = "blake2s"    # blake2s-256
    BLAKE3 = "blake3"


@dataclass(frozen=True)
class Digest:
    algorithm: HashAlgorithm
    value: bytes

    def __len__(self) -> int:
        return len(self.value)


def _sha2_256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def _blake3_256(data: bytes) -> bytes:
    return blake3(data).digest(length=32)


_DIGESTS: Dict[HashAlgorithm, Callable[[bytes], bytes]] = {
    HashAlgorithm.SHA2_256: _sha2_256,
    HashAlgorithm.BLAKE3: _blake3_256,
}


def supported_algorithms() -> List[HashAlgorithm]:
    return [a for a in HashAlgorithm if a in _DIGESTS]


def digest(data: bytes, algorithm: HashAlgorithm | str = HashAlgorithm.SHA2_256) -> Digest:
    """Hash `data` with `algorithm`.

    A string outside the enum raises ValueError; a member with no wired
    implementation raises UnknownHashType.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("data must be bytes-like")
    alg = HashAlgorithm(algorithm)
    fn = _DIGESTS.get(alg)
    if fn is None:
        raise UnknownHashType(detail=alg.value)
    return Digest(alg, fn(bytes(data)))


__all__ = ["HashAlgorithm", "Digest", "digest", "supported_algorithms"]
