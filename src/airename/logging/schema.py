"""Preferred key order for structured log events."""

from __future__ import annotations

DEFAULT_EVENT_KEY_ORDER: tuple[str, ...] = (
    "ts",
    "ts_utc",
    "level",
    "logger",
    "message",
)

EVENT_KEY_ORDER: dict[str, tuple[str, ...]] = {
    "rename_request": (
        "ts",
        "ts_utc",
        "level",
        "kind",
        "model",
        "endpoint",
        "original_name",
        "input_chars",
        "max_tokens",
        "temperature",
    ),
    "rename_response": (
        "ts",
        "ts_utc",
        "level",
        "kind",
        "model",
        "latency_ms",
        "original_name",
        "new_name",
    ),
    "rename_fallback": (
        "ts",
        "ts_utc",
        "level",
        "kind",
        "reason",
        "original_name",
        "candidate",
    ),
    "rename_error": (
        "ts",
        "ts_utc",
        "level",
        "kind",
        "model",
        "latency_ms",
        "original_name",
        "error_type",
        "error",
        "http_method",
        "http_url",
        "http_status",
    ),
}
