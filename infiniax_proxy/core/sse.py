"""SSE (Server-Sent Events) decoding of the infiniax stream and frame encoding.

infiniax frames its reply as blank-line separated records::

    data: {"chunk":"Hel"}

    data: {"chunk":"lo"}

    data: {"done":true}

Only the ``chunk`` text matters; every other payload is ignored and the end
of the byte stream is the sole completion signal.
"""

import codecs
import json
import logging
from typing import Any, AsyncIterator, Optional

logger = logging.getLogger("infiniax-proxy")

RECORD_PREFIX = "data: "
RECORD_SEPARATOR = "\n\n"
DONE_FRAME = b"data: [DONE]\n\n"


def parse_record(record: str) -> Optional[str]:
    """Return the fragment carried by one complete record, if any.

    Records without the ``data: `` prefix, with unparseable JSON, or without
    a non-empty string ``chunk`` yield ``None``. Malformed records are
    skipped rather than failing the stream.
    """
    if not record.startswith(RECORD_PREFIX):
        return None
    try:
        payload = json.loads(record[len(RECORD_PREFIX):])
    except json.JSONDecodeError:
        logger.debug("Skipping unparseable upstream record: %s", record[:100])
        return None
    if not isinstance(payload, dict):
        return None
    chunk = payload.get("chunk")
    if isinstance(chunk, str) and chunk:
        return chunk
    return None


class UpstreamEventDecoder:
    """Incremental decoder turning raw upstream bytes into text fragments.

    Bytes are buffered until a record separator arrives, so records split
    across network reads (even mid-separator or mid-character) are
    reassembled before parsing.
    """

    def __init__(self) -> None:
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._buffer = ""

    def feed(self, chunk: bytes) -> list[str]:
        if not chunk:
            return []
        self._buffer += self._decoder.decode(chunk)
        *records, self._buffer = self._buffer.split(RECORD_SEPARATOR)
        fragments: list[str] = []
        for record in records:
            fragment = parse_record(record)
            if fragment is not None:
                fragments.append(fragment)
        return fragments

    def flush(self) -> list[str]:
        """Parse whatever is left once the upstream stream has ended."""
        leftover = self._buffer + self._decoder.decode(b"", final=True)
        self._buffer = ""
        fragment = parse_record(leftover)
        if fragment is None:
            return []
        return [fragment]


async def iter_fragments(byte_stream: AsyncIterator[bytes]) -> AsyncIterator[str]:
    """Lazily yield fragments, pulling the next byte block only on demand."""
    decoder = UpstreamEventDecoder()
    async for chunk in byte_stream:
        for fragment in decoder.feed(chunk):
            yield fragment
    for fragment in decoder.flush():
        yield fragment


def encode_sse_data(payload: Any) -> bytes:
    """Encode a JSON payload as one ``data: ...`` frame."""
    data = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    return f"data: {data}\n\n".encode("utf-8")
