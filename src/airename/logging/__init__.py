"""Structured logging primitives for airename."""

from .events import (
    extract_http_error_context,
    log_event,
    setup_logging,
    summarize_text,
)
from .formatter import StructuredTextFormatter
from .sanitization import sanitize_error_message
from .schema import DEFAULT_EVENT_KEY_ORDER, EVENT_KEY_ORDER

__all__ = [
    "DEFAULT_EVENT_KEY_ORDER",
    "EVENT_KEY_ORDER",
    "StructuredTextFormatter",
    "extract_http_error_context",
    "log_event",
    "sanitize_error_message",
    "setup_logging",
    "summarize_text",
]
