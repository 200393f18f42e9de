"""Testing utilities for in-process proxy simulations."""

from .fake_upstream import (
    FakeByteStream,
    FakeUpstream,
    UpstreamResponse,
    chunk_records,
    encode_record,
)

__all__ = [
    "FakeByteStream",
    "FakeUpstream",
    "UpstreamResponse",
    "chunk_records",
    "encode_record",
]
