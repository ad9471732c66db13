"""Wire types for OpenAI-compatible chat-completion calls."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from ..errors import ProtocolError

ROLE_USER = "user"


@dataclass(slots=True, frozen=True)
class ChatMessage:
    """One role-tagged message of a conversation."""

    role: str
    content: str

    @classmethod
    def new_user(cls, content: str) -> ChatMessage:
        return cls(role=ROLE_USER, content=content)

    def to_payload(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}

    @classmethod
    def from_payload(cls, payload: Any) -> ChatMessage:
        if not isinstance(payload, Mapping):
            raise ProtocolError("Malformed response: 'message' must be an object")
        content = payload.get("content")
        return cls(
            role=str(payload.get("role") or ""),
            content="" if content is None else str(content),
        )


@dataclass(slots=True, frozen=True)
class ChatRequest:
    """Request body; unset optionals are left out of the payload."""

    model: str
    messages: list[ChatMessage]
    max_tokens: int | None = None
    temperature: float | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "model": self.model,
            "messages": [message.to_payload() for message in self.messages],
        }
        if self.max_tokens is not None:
            payload["max_tokens"] = self.max_tokens
        if self.temperature is not None:
            payload["temperature"] = self.temperature
        return payload


@dataclass(slots=True, frozen=True)
class ChatChoice:
    message: ChatMessage


@dataclass(slots=True, frozen=True)
class APIErrorInfo:
    """Explicit ``error`` object reported inside a response body."""

    message: str
    type: str | None = None
    code: str | None = None

    @classmethod
    def from_payload(cls, payload: Any) -> APIErrorInfo:
        if isinstance(payload, Mapping):
            code = payload.get("code")
            error_type = payload.get("type")
            return cls(
                message=str(payload.get("message") or ""),
                type=None if error_type is None else str(error_type),
                code=None if code is None else str(code),
            )
        return cls(message=str(payload))


@dataclass(slots=True, frozen=True)
class ChatResponse:
    """Parsed chat-completion response."""

    choices: list[ChatChoice] = field(default_factory=list)
    error: APIErrorInfo | None = None

    @classmethod
    def from_payload(cls, payload: Any) -> ChatResponse:
        """Build a response from decoded JSON.

        Raises:
            ProtocolError: If the payload does not have the expected shape
        """
        if not isinstance(payload, Mapping):
            raise ProtocolError("Malformed response: body must be a JSON object")

        raw_error = payload.get("error")
        error = APIErrorInfo.from_payload(raw_error) if raw_error is not None else None

        raw_choices = payload.get("choices")
        if raw_choices is None:
            raw_choices = []
        if not isinstance(raw_choices, list):
            raise ProtocolError("Malformed response: 'choices' must be a list")

        choices: list[ChatChoice] = []
        for raw_choice in raw_choices:
            if not isinstance(raw_choice, Mapping):
                raise ProtocolError("Malformed response: choice must be an object")
            choices.append(ChatChoice(message=ChatMessage.from_payload(raw_choice.get("message"))))

        return cls(choices=choices, error=error)
