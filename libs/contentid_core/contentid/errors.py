# path: libs/contentid_core/contentid/errors.py
"""Error taxonomy for CID computation.

Every failure is terminal: stages raise, nothing retries or falls back.
"""
from __future__ import annotations

from typing import Optional


class CidError(Exception):
    code = "cid_error"
    default_message = "cid error"

    def __init__(self, message: Optional[str] = None, *, detail: Optional[str] = None):
        self.message = message or self.default_message
        self.detail = detail
        super().__init__(self.message)

    def to_dict(self) -> dict:
        out = {"error": self.code, "message": self.message}
        if self.detail:
            out["detail"] = self.detail
        return out


class InvalidDataType(CidError):
    """Input is neither text nor a structured record."""

    code = "invalid_data_type"
    default_message = "invalid data type"


class EncodingFailure(CidError):
    """Structured input could not be serialized to JSON."""

    code = "encoding_failure"
    default_message = "Failed to encode JSON"


class UnknownHashType(CidError):
    """Requested hash algorithm has no digest implementation."""

    code = "unknown_hash_type"
    default_message = "Unknown hash type"


class InvalidBase(CidError):
    """Selected base is neither base32 nor base58."""

    code = "invalid_base"
    default_message = "invalid base"


class MalformedCid(CidError):
    code = "malformed_cid"
    default_message = "malformed cid"


__all__ = [
    "CidError",
    "InvalidDataType",
    "EncodingFailure",
    "UnknownHashType",
    "InvalidBase",
    "MalformedCid",
]
