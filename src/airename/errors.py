"""Typed exceptions for airename."""

from __future__ import annotations


class AIRenameError(Exception):
    """Base exception for airename failures."""


class ConfigError(AIRenameError):
    """Raised when rename configuration cannot be loaded or validated."""


class RenameError(AIRenameError):
    """Base for failures of the remote naming call.

    These are returned next to the fallback name, never raised to callers
    of the generator.
    """


class TransportError(RenameError):
    """Raised for connection, DNS, TLS and other I/O failures."""


class RenameTimeoutError(TransportError):
    """Raised when the request exceeds the configured timeout."""


class RenameCancelledError(RenameError):
    """Raised when the caller's cancellation token fires mid-request."""


class APIStatusError(RenameError):
    """Raised when the endpoint answers with a non-2xx status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"API error: {status_code} {body}")
        self.status_code = status_code
        self.body = body


class ProtocolError(RenameError):
    """Raised when the response body is not a usable chat completion."""


class APIResponseError(ProtocolError):
    """Raised when the response carries an explicit ``error`` object."""

    def __init__(
        self,
        message: str,
        *,
        error_type: str | None = None,
        code: str | None = None,
    ) -> None:
        super().__init__(f"API error: {message}")
        self.api_message = message
        self.error_type = error_type
        self.code = code


class EmptyChoicesError(ProtocolError):
    """Raised when the response has no choices."""
