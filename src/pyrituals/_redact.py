"""Helpers for safe debug logging.

The account hash doubles as the session credential, so it is treated as a
secret alongside the password. Hub hashes are only shortened.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_SECRET_KEYS: frozenset[str] = frozenset({"email", "password"})
# Keys whose string values are opaque hashes, as sent in forms and received in payloads.
_HASH_KEYS: frozenset[str] = frozenset({"account_hash", "hub", "hash"})


def mask_hash(value: str | None) -> str:
    """Shorten an opaque hash for log lines (``abcd…wxyz``)."""
    if not value:
        return "<none>"
    if len(value) <= 8:
        return "<redacted>"
    return f"{value[:4]}…{value[-4:]}"


def redact_for_log(value: Any) -> Any:
    """Return a copy of a form or JSON payload that is safe to log.

    Credentials are replaced outright and hash values are masked. Nested
    dicts and lists are walked; everything else is returned as is.
    """
    if isinstance(value, Mapping):
        redacted: dict[str, Any] = {}
        for k, v in value.items():
            key = str(k)
            if key in _SECRET_KEYS:
                redacted[key] = "<redacted>"
            elif key in _HASH_KEYS and (v is None or isinstance(v, str)):
                redacted[key] = mask_hash(v)
            else:
                redacted[key] = redact_for_log(v)
        return redacted
    if isinstance(value, (list, tuple)):
        return [redact_for_log(v) for v in value]
    return value
