"""Helpers for safe debug logging.

Lookups carry the user's precise position. This module coarsens
coordinates (and truncates long text) before payloads are emitted in
DEBUG logs.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

_COORDINATE_KEYS: frozenset[str] = frozenset(
    {
        "lat",
        "lng",
        "lon",
        "latitude",
        "longitude",
    }
)


def _coarsen(value: Any, precision: int) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return round(float(value), precision)
    if isinstance(value, str):
        try:
            return round(float(value), precision)
        except ValueError:
            return "<redacted>"
    return "<redacted>"


def redact_for_log(
    value: Any,
    *,
    max_string: int = 256,
    precision: int = 2,
    _depth: int = 0,
) -> Any:
    """Return a copy of *value* suitable for debug logs."""
    if _depth > 20:
        return "<max-depth>"

    if value is None:
        return None

    if isinstance(value, str):
        if len(value) > max_string:
            return f"{value[:max_string]}…<truncated>"
        return value

    if isinstance(value, (int, float, bool)):
        return value

    if isinstance(value, bytes):
        return f"<bytes:{len(value)}b>"

    if isinstance(value, Mapping):
        redacted: dict[str, Any] = {}
        for k, v in value.items():
            key = str(k)
            if key.lower() in _COORDINATE_KEYS and v is not None:
                redacted[key] = _coarsen(v, precision)
            else:
                redacted[key] = redact_for_log(v, max_string=max_string, precision=precision, _depth=_depth + 1)
        return redacted

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return [redact_for_log(v, max_string=max_string, precision=precision, _depth=_depth + 1) for v in value]

    # Fallback: represent unknown objects without dumping internals.
    return repr(value)
