"""Plaintext rendering of rename log records.

Each record becomes a block::

    === rename_response ===
    file: notes.txt -> Report.txt
    ts_utc: 2026-01-15T12:34:56.789012Z
    level: INFO
    ...

Rename events get a summary line built from ``kind``, ``original_name`` and
``new_name``; remaining fields follow in the per-event order from
:mod:`.schema`.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

from .schema import DEFAULT_EVENT_KEY_ORDER, EVENT_KEY_ORDER

HTTPX_REQUEST_FORMAT = 'HTTP Request: %s %s "%s %d %s"'

# Events where the original name was kept.
_KEPT_NAME_EVENTS = frozenset({"rename_fallback", "rename_error"})


def _rename_summary(event: str, fields: dict[str, Any]) -> str | None:
    """Pop the name fields of a rename event into one line, if it has them."""
    kind = fields.get("kind")
    original_name = fields.get("original_name")
    if kind is None or original_name is None:
        return None

    fields.pop("kind")
    fields.pop("original_name")
    new_name = fields.pop("new_name", None)
    if new_name is not None:
        return f"{kind}: {original_name} -> {new_name}"
    if event in _KEPT_NAME_EVENTS:
        return f"{kind}: {original_name} (kept)"
    return f"{kind}: {original_name}"


def _httpx_request_fields(record: logging.LogRecord) -> dict[str, Any] | None:
    """Decode httpx's per-request INFO line into fields."""
    if record.name != "httpx" or record.msg != HTTPX_REQUEST_FORMAT:
        return None
    if not isinstance(record.args, tuple) or len(record.args) != 5:
        return None
    method, url, version, status, reason = record.args
    return {
        "event": "httpx_request",
        "http_method": str(method),
        "http_url": str(url),
        "http_version": str(version),
        "http_status": status if isinstance(status, int) else str(status),
        "http_reason": str(reason),
    }


def _event_fields(record: logging.LogRecord, message: str) -> dict[str, Any]:
    """Return the record's fields: a ``log_event`` payload, httpx line or plain text."""
    if message.startswith("{") and message.endswith("}"):
        try:
            payload = json.loads(message)
        except ValueError:
            payload = None
        if isinstance(payload, dict):
            return payload

    httpx_fields = _httpx_request_fields(record)
    if httpx_fields is not None:
        return httpx_fields
    return {"event": record.name, "message": message}


class StructuredTextFormatter(logging.Formatter):
    """Render records as ``=== event ===`` blocks separated by blank lines."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._first_entry = True

    def format(self, record: logging.LogRecord) -> str:
        fields = _event_fields(record, record.getMessage())
        event = str(fields.pop("event", None) or record.name)
        fields = {key: value for key, value in fields.items() if value is not None}
        fields["ts_utc"] = (
            datetime.now(timezone.utc)
            .isoformat(timespec="microseconds")
            .replace("+00:00", "Z")
        )
        fields["level"] = record.levelname
        fields["logger"] = record.name

        lines = [f"=== {event} ==="]
        summary = _rename_summary(event, fields)
        if summary is not None:
            lines.append(summary)

        preferred = EVENT_KEY_ORDER.get(event, DEFAULT_EVENT_KEY_ORDER)
        keys = [key for key in preferred if key in fields]
        keys += sorted(key for key in fields if key not in preferred)
        for key in keys:
            value = str(fields[key]).replace("\n", "\\n")
            lines.append(f"{key}: {value}")

        if record.exc_info:
            lines.append("traceback:")
            lines.append(self.formatException(record.exc_info))

        block = "\n".join(lines)
        if self._first_entry:
            self._first_entry = False
            return block
        return "\n" + block
