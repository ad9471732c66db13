"""Structured event emission and logging helpers."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from ..constants import APP_NAME
from .formatter import StructuredTextFormatter


def _to_log_safe(value: Any) -> Any:
    """Convert values to JSON-serializable, log-safe representations."""
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, dict):
        return {str(k): _to_log_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_to_log_safe(v) for v in value]
    return str(value)


def extract_http_error_context(error: BaseException) -> dict[str, Any]:
    """Extract safe HTTP context from an exception when available."""
    context: dict[str, Any] = {}

    # httpx exceptions raise RuntimeError from the property when unset.
    try:
        request = getattr(error, "request", None)
    except RuntimeError:
        request = None
    response = getattr(error, "response", None)
    if request is None and response is not None:
        request = getattr(response, "request", None)

    if request is not None:
        method = getattr(request, "method", None)
        if method:
            context["http_method"] = str(method)
        url = getattr(request, "url", None)
        if url:
            context["http_url"] = str(url)

    if response is not None:
        status = getattr(response, "status_code", None)
        if status is not None:
            context["http_status"] = status
    else:
        status = getattr(error, "status_code", None)
        if status is not None:
            context["http_status"] = status

    return context


def summarize_text(text: Any) -> str:
    """Return normalized summary text for logs."""
    if text is None:
        return ""
    return " ".join(str(text).split())


def log_event(event: str, level: int = logging.INFO, **fields: Any) -> None:
    """Emit a structured log event."""
    payload = {
        "ts": datetime.now().astimezone().isoformat(),
        "event": event,
    }
    for key, value in fields.items():
        payload[key] = _to_log_safe(value)
    logging.getLogger(APP_NAME).log(
        level, json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    )


def setup_logging(log_file: Optional[str] = None) -> None:
    """Set up logging configuration.

    Without a log file all logging is disabled, so library events never
    reach the CLI's stdout/stderr.
    """
    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(str(log_path), encoding="utf-8")
        handler.setFormatter(StructuredTextFormatter())
        logging.basicConfig(level=logging.INFO, handlers=[handler], force=True)
    else:
        logging.disable(logging.CRITICAL)
