"""Stream adapter for converting infiniax fragments to OpenAI Chat Completions SSE.

Emitted events::

    data: {"id":"chatcmpl-...","object":"chat.completion.chunk","choices":[{"delta":{"role":"assistant","content":"Hel"},...}]}
    data: {"id":"chatcmpl-...","object":"chat.completion.chunk","choices":[{"delta":{"content":"lo"},...}]}
    data: {"id":"chatcmpl-...","object":"chat.completion.chunk","choices":[{"delta":{},"finish_reason":"stop",...}]}
    data: [DONE]
"""

import logging
from typing import AsyncIterator, Optional

from .exceptions import UpstreamError
from .sse import DONE_FRAME, encode_sse_data
from .translator import (
    FINISH_REASON_STOP,
    build_stream_chunk,
    current_timestamp,
    generate_response_id,
)

logger = logging.getLogger("infiniax-proxy")


class FragmentStreamAdapter:
    """Re-encodes the fragment sequence of one call as OpenAI stream chunks.

    The adapter is the call's stream state: one response id and one
    creation timestamp shared by every frame, and a flag recording whether
    the role-bearing first chunk has been emitted. It is used for exactly
    one stream.
    """

    def __init__(
        self,
        model: str,
        response_id: Optional[str] = None,
        created: Optional[int] = None,
    ):
        self.model = model
        self.response_id = response_id or generate_response_id()
        self.created = created if created is not None else current_timestamp()
        self.first_emitted = False
        self.fragment_count = 0

    async def adapt_stream(self, fragments: AsyncIterator[str]) -> AsyncIterator[bytes]:
        """Yield one frame per fragment, then the stop chunk and ``[DONE]``.

        An upstream failure after the response has started cannot change
        the status code any more, so it ends the stream normally.
        """
        try:
            async for fragment in fragments:
                yield self._emit_fragment(fragment)
        except UpstreamError as exc:
            logger.warning(
                "Upstream stream for %s failed after %d fragments: %s",
                self.response_id,
                self.fragment_count,
                exc.message,
            )

        for frame in self._emit_terminal_events():
            yield frame

    def _emit_fragment(self, fragment: str) -> bytes:
        if self.first_emitted:
            delta = {"content": fragment}
        else:
            delta = {"role": "assistant", "content": fragment}
            self.first_emitted = True
        self.fragment_count += 1
        chunk = build_stream_chunk(self.response_id, self.model, self.created, delta)
        return encode_sse_data(chunk)

    def _emit_terminal_events(self) -> list[bytes]:
        chunk = build_stream_chunk(
            self.response_id,
            self.model,
            self.created,
            {},
            finish_reason=FINISH_REASON_STOP,
        )
        return [encode_sse_data(chunk), DONE_FRAME]
