"""Fake infiniax upstream for simulating deterministic responses."""

from __future__ import annotations

import asyncio
import json
from collections import deque
from dataclasses import dataclass, field
from typing import Any, AsyncIterator, Deque, Iterable, Optional

import httpx


def encode_record(event: Any) -> bytes:
    """Encode one upstream record the way infiniax frames it."""
    if isinstance(event, bytes):
        return event
    if isinstance(event, str):
        data = event
    else:
        data = json.dumps(event, ensure_ascii=False)
    return f"data: {data}\n\n".encode("utf-8")


def chunk_records(*fragments: str, done: bool = True) -> list[dict[str, Any]]:
    """Build ``{"chunk": ...}`` records, optionally followed by ``{"done": true}``."""
    records: list[dict[str, Any]] = [{"chunk": fragment} for fragment in fragments]
    if done:
        records.append({"done": True})
    return records


@dataclass
class UpstreamResponse:
    """A queued response to return from the fake upstream.

    Standard fields:
        status_code: HTTP status code (default 200)
        headers: Response headers
        records: Records to stream; dicts are JSON encoded, bytes sent as-is
        body: Raw body sent instead of records
        chunk_delay_s: Delay between body chunks

    Chunk fragmentation:
        chunk_sizes: Byte sizes used to re-split the encoded body; the
            remainder is sent as one final chunk

    Error simulation:
        error_after_chunks: Raise ``error`` after this many body chunks
        error: Exception raised mid-stream (default ``httpx.ReadError``)
        connect_error: Raise this instead of responding at all
    """

    status_code: int = 200
    headers: dict[str, str] = field(default_factory=dict)
    records: list[Any] | None = None
    body: bytes | str | None = None
    chunk_delay_s: float | None = None
    chunk_sizes: list[int] | None = None
    error_after_chunks: int | None = None
    error: Exception | None = None
    connect_error: Exception | None = None

    def encoded_chunks(self) -> list[bytes]:
        if self.body is not None:
            raw = self.body.encode("utf-8") if isinstance(self.body, str) else self.body
            chunks = [raw] if raw else []
        else:
            chunks = [encode_record(record) for record in self.records or []]
        if not self.chunk_sizes:
            return chunks
        joined = b"".join(chunks)
        split: list[bytes] = []
        offset = 0
        for size in self.chunk_sizes:
            piece = joined[offset : offset + size]
            if piece:
                split.append(piece)
            offset += size
        if offset < len(joined):
            split.append(joined[offset:])
        return split


class FakeByteStream(httpx.AsyncByteStream):
    """Response body that yields queued chunks and records whether it was closed."""

    def __init__(self, response: UpstreamResponse, request: httpx.Request) -> None:
        self._response = response
        self._request = request
        self.chunks_sent = 0
        self.closed = False

    async def __aiter__(self) -> AsyncIterator[bytes]:
        response = self._response
        for chunk in response.encoded_chunks():
            if (
                response.error_after_chunks is not None
                and self.chunks_sent >= response.error_after_chunks
            ):
                raise response.error or httpx.ReadError(
                    "Simulated connection reset", request=self._request
                )
            if self.closed:
                return
            self.chunks_sent += 1
            yield chunk
            if response.chunk_delay_s:
                await asyncio.sleep(response.chunk_delay_s)
        if response.error_after_chunks is not None and self.chunks_sent >= response.error_after_chunks:
            raise response.error or httpx.ReadError(
                "Simulated connection reset", request=self._request
            )

    async def aclose(self) -> None:
        self.closed = True


class FakeUpstream:
    """Stand-in for the infiniax chat stream endpoint.

    Supports:
    - Deterministic response queueing
    - Request tracking/inspection
    - Chunk fragmentation for framing edge cases
    - Transport and mid-stream error simulation

    Usage:
        upstream = FakeUpstream()
        upstream.enqueue_chunks("Hel", "lo")
        app = create_app(settings, transport=upstream.transport)
    """

    def __init__(self, responses: Optional[Iterable[UpstreamResponse]] = None) -> None:
        self._queue: Deque[UpstreamResponse] = deque(responses or [])
        self.received: list[dict[str, Any]] = []
        self.streams: list[FakeByteStream] = []
        self.transport = httpx.MockTransport(self._handle)

    def enqueue(self, response: UpstreamResponse) -> None:
        """Add a response to the queue."""
        self._queue.append(response)

    def clear(self) -> None:
        """Clear all queued responses and received requests."""
        self._queue.clear()
        self.received.clear()
        self.streams.clear()

    # -------------------------------------------------------------------------
    # Convenience methods for common response types
    # -------------------------------------------------------------------------

    def enqueue_chunks(self, *fragments: str, done: bool = True, **kwargs: Any) -> None:
        """Enqueue a successful stream carrying ``fragments`` in order."""
        self.enqueue(UpstreamResponse(records=chunk_records(*fragments, done=done), **kwargs))

    def enqueue_error_response(self, status_code: int, message: str = "error") -> None:
        self.enqueue(
            UpstreamResponse(
                status_code=status_code,
                body=json.dumps({"error": message}),
                headers={"content-type": "application/json"},
            )
        )

    def enqueue_connect_error(self, message: str = "Simulated connection failure") -> None:
        self.enqueue(UpstreamResponse(connect_error=httpx.ConnectError(message)))

    # -------------------------------------------------------------------------
    # Request handling
    # -------------------------------------------------------------------------

    async def _handle(self, request: httpx.Request) -> httpx.Response:
        body = await request.aread()
        try:
            payload: Any = json.loads(body)
        except ValueError:
            payload = None

        self.received.append(
            {
                "method": request.method,
                "url": str(request.url),
                "headers": dict(request.headers),
                "json": payload,
            }
        )

        if not self._queue:
            return httpx.Response(
                500, json={"error": {"message": "No upstream responses queued"}}
            )

        response = self._queue.popleft()
        if response.connect_error is not None:
            error = response.connect_error
            if isinstance(error, httpx.RequestError):
                error.request = request
            raise error

        stream = FakeByteStream(response, request)
        self.streams.append(stream)
        headers = {"content-type": "text/event-stream", **response.headers}
        return httpx.Response(response.status_code, headers=headers, stream=stream)
