"""Type definitions for the proxy."""

from .chat import (
    ChatCompletion,
    ChatCompletionChunk,
    ChatMessage,
    ChatRequest,
    CompletionChoice,
    Delta,
    ErrorBody,
    ErrorDetail,
    ModelCard,
    ModelList,
    StreamChoice,
    UpstreamEvent,
    UpstreamRequest,
)

__all__ = [
    "ChatCompletion",
    "ChatCompletionChunk",
    "ChatMessage",
    "ChatRequest",
    "CompletionChoice",
    "Delta",
    "ErrorBody",
    "ErrorDetail",
    "ModelCard",
    "ModelList",
    "StreamChoice",
    "UpstreamEvent",
    "UpstreamRequest",
]
