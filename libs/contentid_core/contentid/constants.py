from __future__ import annotations

from typing import Final

# CID layout: <version><codec><multihash>
CID_VERSION: Final[int] = 1
RAW_CODEC: Final[int] = 0x55  # multicodec "raw" ("U")

# Multibase prefixes
BASE32_PREFIX: Final[str] = "b"
BASE58BTC_PREFIX: Final[str] = "z"

# Process-wide base selection
ENV_BASE: Final[str] = "CONTENTID_BASE"        # base32 | base58
DEFAULT_BASE: Final[str] = "base32"

# Inputs above this size hash to a CID the network will not reproduce
# (it chunks them into a DAG). Documented for callers, not enforced.
MAX_COMPAT_INPUT_BYTES: Final[int] = 256 * 1024

__all__ = [
    "CID_VERSION",
    "RAW_CODEC",
    "BASE32_PREFIX",
    "BASE58BTC_PREFIX",
    "ENV_BASE",
    "DEFAULT_BASE",
    "MAX_COMPAT_INPUT_BYTES",
]
