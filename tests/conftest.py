"""Pytest configuration and fixtures for airename tests."""

import logging
import threading
from http.server import ThreadingHTTPServer
from typing import Any, Callable

import pytest

from airename.config import RenameConfig
from airename.runtime import reset_name_generator
from test_helpers import ENDPOINT, KeepAliveChatHandler


@pytest.fixture
def make_config() -> Callable[..., RenameConfig]:
    """Factory for enabled configs pointing at the mock endpoint."""

    def _make(**overrides: Any) -> RenameConfig:
        values: dict[str, Any] = {
            "enabled": True,
            "endpoint": ENDPOINT,
            "model": "test-model",
            "api_key": "sk-test-key-1234567890",
            "timeout": 5.0,
        }
        values.update(overrides)
        return RenameConfig(**values)

    return _make


@pytest.fixture
def chat_server_url(monkeypatch):
    """Serve chat completions over real keep-alive connections on localhost."""
    for var in ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "http_proxy", "https_proxy", "all_proxy"):
        monkeypatch.delenv(var, raising=False)

    server = ThreadingHTTPServer(("127.0.0.1", 0), KeepAliveChatHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        host, port = server.server_address[:2]
        yield f"http://{host}:{port}/v1/chat/completions"
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=5)


@pytest.fixture(autouse=True)
def _restore_global_state():
    """Undo CLI logging shutdown and drop the shared generator after each test."""
    yield
    logging.disable(logging.NOTSET)
    reset_name_generator()
