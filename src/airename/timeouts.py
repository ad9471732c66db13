"""Centralized timeout policy and helpers."""

from __future__ import annotations

import math
import re
from typing import Any

import httpx


# Default request timeout when the config does not set one.
DEFAULT_RENAME_TIMEOUT_SEC = 30

# Shared HTTP timeout buckets (upper bounds; never above the configured timeout).
RENAME_HTTP_CONNECT_TIMEOUT_SEC = 10.0
RENAME_HTTP_WRITE_TIMEOUT_SEC = 15.0
RENAME_HTTP_POOL_TIMEOUT_SEC = 5.0

_DURATION_PART_PATTERN = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ms|us|µs|ns|h|m|s)")
_DURATION_UNITS_SEC = {
    "h": 3600.0,
    "m": 60.0,
    "s": 1.0,
    "ms": 1e-3,
    "us": 1e-6,
    "µs": 1e-6,
    "ns": 1e-9,
}


def normalize_timeout_value(value: Any, fallback: int | float) -> int | float:
    """Normalize timeout-like values to non-negative finite int/float."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        normalized = float(fallback)
    else:
        normalized = float(value)
    if not math.isfinite(normalized) or normalized < 0:
        normalized = float(fallback)
    if normalized.is_integer():
        return int(normalized)
    return normalized


def parse_duration(text: str) -> float:
    """Parse a duration string such as ``"30s"``, ``"1m30s"`` or ``"500ms"``.

    A bare number is read as seconds.

    Raises:
        ValueError: If the string is not a valid duration
    """
    value = text.strip()
    if not value:
        raise ValueError("Duration must not be empty")

    try:
        return float(value)
    except ValueError:
        pass

    total = 0.0
    position = 0
    for match in _DURATION_PART_PATTERN.finditer(value):
        if match.start() != position:
            break
        total += float(match.group(1)) * _DURATION_UNITS_SEC[match.group(2)]
        position = match.end()

    if position != len(value):
        raise ValueError(f"Invalid duration: {text!r}")
    return total


def build_rename_httpx_timeout(timeout_sec: int | float) -> httpx.Timeout | None:
    """Build httpx timeout config for the chat-completion client.

    Returns ``None`` (no timeout) when ``timeout_sec`` is 0.
    """
    read_timeout = normalize_timeout_value(timeout_sec, DEFAULT_RENAME_TIMEOUT_SEC)
    if read_timeout <= 0:
        return None
    return httpx.Timeout(
        connect=min(RENAME_HTTP_CONNECT_TIMEOUT_SEC, read_timeout),
        read=read_timeout,
        write=min(RENAME_HTTP_WRITE_TIMEOUT_SEC, read_timeout),
        pool=min(RENAME_HTTP_POOL_TIMEOUT_SEC, read_timeout),
    )
