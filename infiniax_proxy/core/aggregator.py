"""Aggregation of a fragment stream into a single chat completion."""

import logging
from typing import AsyncIterator

from ..types import ChatCompletion
from .translator import build_chat_completion

logger = logging.getLogger("infiniax-proxy")


async def aggregate_completion(fragments: AsyncIterator[str], model: str) -> ChatCompletion:
    """Drain ``fragments`` and return the concatenated text as one completion.

    An empty stream produces a completion with empty content. Upstream
    errors raised while draining propagate to the caller.
    """
    parts: list[str] = []
    async for fragment in fragments:
        parts.append(fragment)
    logger.debug("Aggregated %d fragments for model %s", len(parts), model)
    return build_chat_completion("".join(parts), model)
