# path: libs/contentid_core/contentid/__init__.py
"""
contentid core package.

Computes IPFS-compatible CIDv1 (raw codec) strings for text and structured
records, with the multihash/multibase helpers the computation is built from.
"""
from .cid import cid, assemble, parse_cid, CidInfo
from .canonical import Text, StructuredRecord, classify, canonical_bytes
from .config import set_base, reset_base, get_base
from .digest import HashAlgorithm, Digest, digest, supported_algorithms
from .multibase import Base
from .errors import (
    CidError,
    InvalidDataType,
    EncodingFailure,
    UnknownHashType,
    InvalidBase,
    MalformedCid,
)

__all__ = [
    "cid",
    "assemble",
    "parse_cid",
    "CidInfo",
    "Text",
    "StructuredRecord",
    "classify",
    "canonical_bytes",
    "set_base",
    "reset_base",
    "get_base",
    "HashAlgorithm",
    "Digest",
    "digest",
    "supported_algorithms",
    "Base",
    "CidError",
    "InvalidDataType",
    "EncodingFailure",
    "UnknownHashType",
    "InvalidBase",
    "MalformedCid",
]
