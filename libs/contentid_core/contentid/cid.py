# path: libs/contentid_core/contentid/cid.py
"""CIDv1 (raw codec) computation.

Pipeline, each step feeding the next:
  1) classify + canonicalize the input (text as-is, records as sorted JSON)
  2) digest the bytes with the requested algorithm
  3) wrap the digest in a multihash
  4) prepend <version=1><codec=raw> and multibase-encode

For the result to match what an IPFS node assigns, the canonical bytes must
stay under 256 KiB (see MAX_COMPAT_INPUT_BYTES). This is not checked.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from . import config, multibase, multihash
from .canonical import canonical_bytes
from .constants import CID_VERSION, RAW_CODEC
from .digest import HashAlgorithm, digest
from .errors import MalformedCid
from .multibase import Base

_log = logging.getLogger(__name__)

_SUFFIX_HEADER = bytes([CID_VERSION, RAW_CODEC])


def cid_suffix(mh: bytes) -> bytes:
    return _SUFFIX_HEADER + mh


def assemble(mh: bytes, base: Any) -> str:
    """Encode <version><codec><multihash> in `base` with its multibase prefix."""
    return multibase.encode(cid_suffix(mh), base)


def cid(value: Any, hash_type: HashAlgorithm | str = HashAlgorithm.SHA2_256, *, base: Any = None) -> str:
    """
    Return the CIDv1 (raw codec) an IPFS node would assign to `value`.

    `value` may be a str/bytes, a mapping, a dataclass instance or a pydantic
    model. `base` overrides the process-wide setting for this call; the base is
    only resolved after hashing, so a bad configuration raises InvalidBase
    even though the digest was computed.

    Raises InvalidDataType, EncodingFailure, UnknownHashType or InvalidBase.
    """
    data = canonical_bytes(value)
    d = digest(data, hash_type)
    mh = multihash.encode(d.algorithm, d)
    selected = base if base is not None else config.get_base()
    out = assemble(mh, selected)
    _log.debug("cid %s (%s, %d bytes)", out, d.algorithm.value, len(data))
    return out


@dataclass(frozen=True)
class CidInfo:
    version: int
    codec: int
    hash_code: int
    algorithm: Optional[HashAlgorithm]
    digest: bytes
    base: Base

    def to_dict(self) -> dict:
        return {
            "version": self.version,
            "codec": self.codec,
            "hash_code": self.hash_code,
            "hash": self.algorithm.value if self.algorithm else None,
            "digest_hex": self.digest.hex(),
            "base": self.base.value,
        }


def parse_cid(text: str) -> CidInfo:
    """Decode a CIDv1 raw-codec string back into its parts."""
    base, raw = multibase.decode(text)
    version, i = multihash.read_varint(raw)
    if version != CID_VERSION:
        raise MalformedCid("unsupported cid version", detail=str(version))
    codec, i = multihash.read_varint(raw, i)
    if codec != RAW_CODEC:
        raise MalformedCid("unsupported codec", detail=hex(codec))
    code, dig = multihash.decode(raw[i:])
    return CidInfo(
        version=version,
        codec=codec,
        hash_code=code,
        algorithm=multihash.algorithm_for_code(code),
        digest=dig,
        base=base,
    )


__all__ = ["cid", "assemble", "cid_suffix", "parse_cid", "CidInfo"]
