"""OpenAI Chat Completions <-> infiniax translation.

Key mappings:
- model -> modelId (verbatim)
- messages -> messages (verbatim, same order)
- web_search (truthy) -> webSearchEnabled: true, omitted otherwise

Responses are rebuilt in the OpenAI shape from the plain text fragments
infiniax streams back.
"""

from __future__ import annotations

import time
import uuid
from typing import Mapping, Optional

from ..types import ChatCompletion, ChatCompletionChunk, Delta, UpstreamRequest

CHUNK_OBJECT = "chat.completion.chunk"
COMPLETION_OBJECT = "chat.completion"
FINISH_REASON_STOP = "stop"


def to_upstream_request(payload: Mapping) -> UpstreamRequest:
    """Translate a validated chat request into the infiniax request body."""
    result: UpstreamRequest = {
        "modelId": payload["model"],
        "messages": payload["messages"],
    }
    if payload.get("web_search"):
        result["webSearchEnabled"] = True
    return result


def generate_response_id() -> str:
    """Return a fresh ``chatcmpl-`` identifier with 24 hex characters."""
    return f"chatcmpl-{uuid.uuid4().hex[:24]}"


def current_timestamp() -> int:
    return int(time.time())


def build_stream_chunk(
    response_id: str,
    model: str,
    created: int,
    delta: Delta,
    finish_reason: Optional[str] = None,
) -> ChatCompletionChunk:
    return {
        "id": response_id,
        "object": CHUNK_OBJECT,
        "created": created,
        "model": model,
        "choices": [
            {
                "index": 0,
                "delta": delta,
                "finish_reason": finish_reason,
            }
        ],
    }


def build_chat_completion(content: str, model: str) -> ChatCompletion:
    """Wrap aggregated assistant text in a complete response object."""
    return {
        "id": generate_response_id(),
        "object": COMPLETION_OBJECT,
        "created": current_timestamp(),
        "model": model,
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": FINISH_REASON_STOP,
            }
        ],
    }
