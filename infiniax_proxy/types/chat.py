"""Types for the chat payloads exchanged with callers and with infiniax.

This module defines type schemas for both sides of the gateway:
- OpenAI-compatible types: what callers send to and receive from the proxy
- Infiniax types: the request body posted to the upstream stream endpoint
"""

from typing_extensions import TypedDict


# =============================================================================
# OpenAI-Compatible Types
# =============================================================================


class ChatMessage(TypedDict):
    """A message in a chat conversation (OpenAI format).

    Attributes:
        role: Role of the message sender ("system", "user", "assistant").
        content: Text content of the message.
    """
    role: str
    content: str


class _ChatRequestRequired(TypedDict):
    model: str
    messages: list[ChatMessage]


class ChatRequest(_ChatRequestRequired, total=False):
    """A chat completion request as received from a caller.

    Attributes:
        model: Upstream model identifier, passed through verbatim.
        messages: Ordered conversation history.
        stream: Stream the reply as server-sent events when exactly ``True``.
        web_search: Ask the upstream to ground the reply with web search.
        temperature: Accepted for compatibility, not forwarded.
        max_tokens: Accepted for compatibility, not forwarded.
    """
    stream: bool
    web_search: bool
    temperature: float
    max_tokens: int


class Delta(TypedDict, total=False):
    """A streamed delta of a choice.

    Attributes:
        role: "assistant" on the first content chunk of a stream only.
        content: Incremental text content.
    """
    role: str
    content: str


class StreamChoice(TypedDict):
    index: int
    delta: Delta
    finish_reason: str | None


class ChatCompletionChunk(TypedDict):
    """A streamed chunk of a chat completion response.

    Attributes:
        id: Response identifier shared by every chunk of one call.
        object: Always "chat.completion.chunk".
        created: Unix timestamp fixed at the start of the call.
        model: Model name echoed from the request.
        choices: A single choice delta.
    """
    id: str
    object: str
    created: int
    model: str
    choices: list[StreamChoice]


class CompletionChoice(TypedDict):
    index: int
    message: ChatMessage
    finish_reason: str


class ChatCompletion(TypedDict):
    """A complete (non-streaming) chat completion response.

    Attributes:
        id: Unique identifier for this completion.
        object: Always "chat.completion".
        created: Unix timestamp of when the response was assembled.
        model: Model name echoed from the request.
        choices: One choice holding the aggregated assistant message.
    """
    id: str
    object: str
    created: int
    model: str
    choices: list[CompletionChoice]


class ModelCard(TypedDict):
    """An entry of the ``/v1/models`` listing."""
    id: str
    object: str
    created: int
    owned_by: str


class ModelList(TypedDict):
    object: str
    data: list[ModelCard]


class ErrorDetail(TypedDict):
    message: str


class ErrorBody(TypedDict):
    """Body of every error response: ``{"error": {"message": ...}}``."""
    error: ErrorDetail


# =============================================================================
# Infiniax Types
# =============================================================================


class _UpstreamRequestRequired(TypedDict):
    modelId: str
    messages: list[ChatMessage]


class UpstreamRequest(_UpstreamRequestRequired, total=False):
    """Body posted to the infiniax chat stream endpoint.

    Attributes:
        modelId: The caller's model identifier, unchanged.
        messages: The caller's messages, unchanged.
        webSearchEnabled: Present (and true) only when web search was requested.
    """
    webSearchEnabled: bool


class UpstreamEvent(TypedDict, total=False):
    """JSON payload of one upstream ``data:`` record.

    Content records carry ``chunk``; the final record carries ``done``.
    """
    chunk: str
    done: bool
