"""AI-assisted file and folder naming.

Both entry points return ``(name, error)``. The name is always usable:
when the model call fails it is the original name and ``error`` says why.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Optional

import httpx

from .ai import ChatCompletionClient, ChatMessage, ChatRequest
from .config import RenameConfig
from .errors import RenameCancelledError, RenameError
from .logging import (
    extract_http_error_context,
    log_event,
    sanitize_error_message,
    summarize_text,
)
from .prompts import build_file_name_prompt, build_folder_name_prompt
from .sanitizer import sanitize_file_name, sanitize_folder_name, split_extension

KIND_FILE = "file"
KIND_FOLDER = "folder"


class NameGenerator:
    """Ask a chat-completion endpoint for descriptive names.

    Configuration is fixed at construction, so one instance can serve any
    number of concurrent calls, from any thread or event loop.
    """

    def __init__(self, config: RenameConfig, *, client: httpx.AsyncClient | None = None):
        """Initialize the generator.

        Args:
            config: Rename settings (read-only)
            client: Optional ``httpx.AsyncClient`` to send requests through
        """
        self.config = config
        self.chat_client = ChatCompletionClient(
            config.endpoint,
            config.api_key,
            timeout=config.timeout,
            client=client,
        )

    @property
    def enabled(self) -> bool:
        return self.config.enabled

    async def generate_file_name(
        self,
        message_text: str,
        original_file_name: str,
        *,
        cancel: Optional[asyncio.Event] = None,
    ) -> tuple[str, RenameError | None]:
        """Suggest a new name for a file, keeping its extension.

        Args:
            message_text: Text of the message the file came with
            original_file_name: Current name, extension included
            cancel: Optional token; setting it aborts the in-flight request

        Returns:
            ``(new_name, None)`` on success or when there is nothing to do,
            ``(original_file_name, error)`` when the request failed
        """
        if not self.config.enabled or not message_text:
            return original_file_name, None

        base_name, extension = split_extension(original_file_name)
        prompt = build_file_name_prompt(
            message_text,
            base_name,
            custom_template=self.config.prompt or None,
            language=self.config.language or None,
        )

        started = time.perf_counter()
        candidate, error = await self._suggest(KIND_FILE, prompt, original_file_name, cancel)
        if error is not None:
            return original_file_name, error

        clean_name = sanitize_file_name(candidate)
        if not clean_name:
            self._log_empty_result(KIND_FILE, original_file_name, candidate)
            return original_file_name, None

        if not clean_name.endswith(extension):
            clean_name += extension

        self._log_renamed(KIND_FILE, original_file_name, clean_name, started)
        return clean_name, None

    async def generate_folder_name(
        self,
        message_text: str,
        default_name: str,
        *,
        cancel: Optional[asyncio.Event] = None,
    ) -> tuple[str, RenameError | None]:
        """Suggest a folder name for a media group.

        Same contract as :meth:`generate_file_name`, without extension
        handling and with the shorter folder length limit.
        """
        if not self.config.enabled or not message_text:
            return default_name, None

        prompt = build_folder_name_prompt(
            message_text,
            default_name,
            custom_template=self.config.prompt or None,
            language=self.config.language or None,
        )

        started = time.perf_counter()
        candidate, error = await self._suggest(KIND_FOLDER, prompt, default_name, cancel)
        if error is not None:
            return default_name, error

        clean_name = sanitize_folder_name(candidate)
        if not clean_name:
            self._log_empty_result(KIND_FOLDER, default_name, candidate)
            return default_name, None

        self._log_renamed(KIND_FOLDER, default_name, clean_name, started)
        return clean_name, None

    def _build_request(self, prompt: str) -> ChatRequest:
        return ChatRequest(
            model=self.config.model,
            messages=[ChatMessage.new_user(prompt)],
            max_tokens=self.config.max_tokens,
            temperature=self.config.temperature,
        )

    async def _suggest(
        self,
        kind: str,
        prompt: str,
        original_name: str,
        cancel: Optional[asyncio.Event],
    ) -> tuple[str, RenameError | None]:
        """Run one model call; remote failures come back as the error."""
        request = self._build_request(prompt)
        log_event(
            "rename_request",
            level=logging.INFO,
            kind=kind,
            model=request.model,
            endpoint=self.config.endpoint,
            original_name=original_name,
            input_chars=len(prompt),
            max_tokens=request.max_tokens,
            temperature=request.temperature,
        )

        started = time.perf_counter()
        try:
            candidate = await self._complete(request, cancel)
        except RenameError as e:
            error_text = sanitize_error_message(str(e))
            cause = e.__cause__ if e.__cause__ is not None else e
            log_event(
                "rename_error",
                level=logging.ERROR,
                kind=kind,
                model=request.model,
                latency_ms=round((time.perf_counter() - started) * 1000, 1),
                original_name=original_name,
                error_type=type(e).__name__,
                error=error_text,
                **extract_http_error_context(cause),
            )
            logging.error(
                "AI %s rename failed, keeping %r: %s",
                kind,
                original_name,
                error_text,
            )
            return "", e

        return candidate, None

    async def _complete(self, request: ChatRequest, cancel: Optional[asyncio.Event]) -> str:
        """Send ``request``, aborting it if ``cancel`` fires first."""
        if cancel is None:
            return await self.chat_client.complete(request)
        if cancel.is_set():
            raise RenameCancelledError("rename request cancelled before sending")

        request_task = asyncio.ensure_future(self.chat_client.complete(request))
        cancel_task = asyncio.ensure_future(cancel.wait())
        try:
            await asyncio.wait(
                {request_task, cancel_task},
                return_when=asyncio.FIRST_COMPLETED,
            )
        finally:
            cancel_task.cancel()
            if not request_task.done():
                request_task.cancel()
            await asyncio.gather(request_task, cancel_task, return_exceptions=True)

        if request_task.cancelled():
            raise RenameCancelledError("rename request cancelled")
        return request_task.result()

    def _log_empty_result(self, kind: str, original_name: str, candidate: str) -> None:
        log_event(
            "rename_fallback",
            level=logging.WARNING,
            kind=kind,
            reason="empty_result",
            original_name=original_name,
            candidate=summarize_text(candidate),
        )

    def _log_renamed(self, kind: str, original_name: str, new_name: str, started: float) -> None:
        log_event(
            "rename_response",
            level=logging.INFO,
            kind=kind,
            model=self.config.model,
            latency_ms=round((time.perf_counter() - started) * 1000, 1),
            original_name=original_name,
            new_name=new_name,
        )

    async def aclose(self) -> None:
        await self.chat_client.aclose()

    async def __aenter__(self) -> NameGenerator:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
