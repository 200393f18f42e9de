"""Core module initialization."""

from .aggregator import aggregate_completion
from .exceptions import (
    ClientDisconnectedError,
    InvalidRequestError,
    ProxyError,
    UpstreamAuthError,
    UpstreamError,
)
from .sse import UpstreamEventDecoder, encode_sse_data, iter_fragments, parse_record
from .stream_adapter import FragmentStreamAdapter
from .translator import (
    build_chat_completion,
    build_stream_chunk,
    generate_response_id,
    to_upstream_request,
)
from .upstream import UpstreamClient

__all__ = [
    "ClientDisconnectedError",
    "FragmentStreamAdapter",
    "InvalidRequestError",
    "ProxyError",
    "UpstreamAuthError",
    "UpstreamClient",
    "UpstreamError",
    "UpstreamEventDecoder",
    "aggregate_completion",
    "build_chat_completion",
    "build_stream_chunk",
    "encode_sse_data",
    "generate_response_id",
    "iter_fragments",
    "parse_record",
    "to_upstream_request",
]
