"""Chat-completion wire types and HTTP client."""

from .chat_client import ChatCompletionClient
from .chat_types import APIErrorInfo, ChatChoice, ChatMessage, ChatRequest, ChatResponse

__all__ = [
    "APIErrorInfo",
    "ChatChoice",
    "ChatCompletionClient",
    "ChatMessage",
    "ChatRequest",
    "ChatResponse",
]
