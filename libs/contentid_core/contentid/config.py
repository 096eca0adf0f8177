"""Process-wide base selection.

`set_base` accepts any value and never fails; an unrecognized value is only
rejected (InvalidBase) when a CID is encoded. Reads are a single module
attribute load; callers that reconfigure while other threads compute CIDs
get whichever value was present when each call reached its encode step.
"""
from __future__ import annotations

import os
from typing import Any

from .constants import DEFAULT_BASE, ENV_BASE

_UNSET = object()
_base: Any = _UNSET


def set_base(value: Any) -> None:
    global _base
    _base = value


def reset_base() -> None:
    """Drop any override so the environment/default applies again."""
    global _base
    _base = _UNSET


def get_base() -> Any:
    """Configured base: override (None counts as unset), else $CONTENTID_BASE, else base32."""
    value = _base
    if value is not _UNSET and value is not None:
        return value
    return (os.getenv(ENV_BASE) or "").strip() or DEFAULT_BASE


__all__ = ["set_base", "reset_base", "get_base"]
