"""Minimal client for OpenAI-compatible chat-completion endpoints.

One POST per call, no retries. Failures surface as ``RenameError``
subclasses, checked in this order: transport, HTTP status, payload shape,
explicit ``error`` object, empty ``choices``.
"""

from __future__ import annotations

import asyncio
import json
import threading
from typing import Any

import httpx

from ..errors import (
    APIResponseError,
    APIStatusError,
    EmptyChoicesError,
    ProtocolError,
    RenameTimeoutError,
    TransportError,
)
from ..timeouts import (
    DEFAULT_RENAME_TIMEOUT_SEC,
    build_rename_httpx_timeout,
    normalize_timeout_value,
)
from .chat_types import ChatRequest, ChatResponse


class ChatCompletionClient:
    """Send chat requests to a single configured endpoint."""

    def __init__(
        self,
        endpoint: str,
        api_key: str,
        *,
        timeout: int | float = DEFAULT_RENAME_TIMEOUT_SEC,
        client: httpx.AsyncClient | None = None,
    ):
        """Initialize the client.

        Args:
            endpoint: Full URL requests are POSTed to
            api_key: Bearer token
            timeout: Request timeout in seconds (0 = no timeout)
            client: Optional shared ``httpx.AsyncClient``; not closed by ``aclose``.
                The caller keeps it on a single event loop.
        """
        self.endpoint = endpoint
        self.api_key = api_key
        self.timeout = normalize_timeout_value(timeout, DEFAULT_RENAME_TIMEOUT_SEC)
        self._injected_client = client
        # Pooled connections belong to the loop that opened them, so owned
        # clients are kept per event loop.
        self._loop_clients: dict[asyncio.AbstractEventLoop, httpx.AsyncClient] = {}
        self._loop_clients_lock = threading.Lock()

    @property
    def owns_client(self) -> bool:
        return self._injected_client is None

    def http_client(self) -> httpx.AsyncClient:
        """Return the ``httpx.AsyncClient`` to use on the running event loop.

        An injected client is always returned as-is. Otherwise each loop gets
        its own client, created on first use there.
        """
        if self._injected_client is not None:
            return self._injected_client

        loop = asyncio.get_running_loop()
        with self._loop_clients_lock:
            client = self._loop_clients.get(loop)
            if client is None or client.is_closed:
                # Clients of finished loops can no longer be closed; drop them.
                for stale_loop in [other for other in self._loop_clients if other.is_closed()]:
                    del self._loop_clients[stale_loop]
                client = httpx.AsyncClient(timeout=build_rename_httpx_timeout(self.timeout))
                self._loop_clients[loop] = client
        return client

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

    async def _post(self, payload: dict[str, Any]) -> httpx.Response:
        try:
            return await self.http_client().post(
                self.endpoint,
                content=json.dumps(payload, ensure_ascii=False).encode("utf-8"),
                headers=self._headers(),
            )
        except httpx.TimeoutException as e:
            raise RenameTimeoutError(f"send request: timed out: {e}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"send request: {type(e).__name__}: {e}") from e

    async def send(self, request: ChatRequest) -> httpx.Response:
        """POST ``request`` and return the raw response.

        The configured timeout also bounds the whole exchange.

        Raises:
            TransportError: On I/O failure (``RenameTimeoutError`` on timeout)
        """
        payload = request.to_payload()
        if self.timeout <= 0:
            return await self._post(payload)
        try:
            return await asyncio.wait_for(self._post(payload), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise RenameTimeoutError(
                f"send request: no response within {self.timeout}s"
            ) from e

    async def complete(self, request: ChatRequest) -> str:
        """Send ``request`` and return the first choice's content, trimmed.

        Raises:
            TransportError: On I/O failure
            APIStatusError: On non-2xx status
            ProtocolError: On malformed body, explicit API error or no choices
        """
        response = await self.send(request)

        if not response.is_success:
            raise APIStatusError(response.status_code, response.text)

        try:
            data = response.json()
        except ValueError as e:
            raise ProtocolError(f"unmarshal response: {e}") from e

        chat_response = ChatResponse.from_payload(data)

        if chat_response.error is not None:
            raise APIResponseError(
                chat_response.error.message,
                error_type=chat_response.error.type,
                code=chat_response.error.code,
            )

        if not chat_response.choices:
            raise EmptyChoicesError("no choices in response")

        return chat_response.choices[0].message.content.strip()

    async def aclose(self) -> None:
        """Close the owned client of the running loop; injected clients stay open."""
        if self._injected_client is not None:
            return
        loop = asyncio.get_running_loop()
        with self._loop_clients_lock:
            client = self._loop_clients.pop(loop, None)
        if client is not None:
            await client.aclose()

    async def __aenter__(self) -> ChatCompletionClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
