"""OpenAI-compatible chat completions endpoint backed by infiniax."""

import json
import logging
from typing import Any

import httpx
from fastapi import Request, Response
from fastapi.responses import JSONResponse, StreamingResponse
from starlette.requests import ClientDisconnect

from ...core import (
    ClientDisconnectedError,
    FragmentStreamAdapter,
    InvalidRequestError,
    ProxyError,
    UpstreamClient,
    aggregate_completion,
    iter_fragments,
    to_upstream_request,
)
from ...types import ChatRequest
from ..errors import INTERNAL_ERROR_MESSAGE, error_response, proxy_error_response

logger = logging.getLogger("infiniax-proxy")

STREAM_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
}


def parse_chat_request(body: bytes) -> ChatRequest:
    """Decode and validate a chat completion request body.

    Raises:
        InvalidRequestError: The body is not JSON, not an object, or lacks
            a model name or a non-empty messages array.
    """
    try:
        payload: Any = json.loads(body)
    except ValueError as exc:
        raise InvalidRequestError("Invalid JSON") from exc

    if not isinstance(payload, dict):
        raise InvalidRequestError("Request body must be a JSON object")

    model = payload.get("model")
    messages = payload.get("messages")
    if not isinstance(model, str) or not model or not isinstance(messages, list) or not messages:
        raise InvalidRequestError("Missing required fields: model and messages")
    return payload


def _stream_response(
    client: UpstreamClient,
    resp: httpx.Response,
    model: str,
    request: Request,
) -> StreamingResponse:
    adapter = FragmentStreamAdapter(model)

    async def iterator():
        try:
            fragments = iter_fragments(
                client.iter_bytes(resp, disconnect_checker=request.is_disconnected)
            )
            async for frame in adapter.adapt_stream(fragments):
                yield frame
            logger.info(
                "Stream %s completed with %d fragments",
                adapter.response_id,
                adapter.fragment_count,
            )
        except ClientDisconnectedError:
            logger.info(
                "Client disconnected from stream %s after %d fragments",
                adapter.response_id,
                adapter.fragment_count,
            )
        finally:
            await resp.aclose()

    return StreamingResponse(
        iterator(),
        status_code=200,
        headers=STREAM_HEADERS,
        media_type="text/event-stream",
    )


async def _aggregate_response(
    client: UpstreamClient, resp: httpx.Response, model: str
) -> JSONResponse:
    try:
        completion = await aggregate_completion(iter_fragments(client.iter_bytes(resp)), model)
    finally:
        await resp.aclose()
    logger.info("Completion %s assembled for model %s", completion["id"], model)
    return JSONResponse(completion)


async def handle_chat_request(request: Request) -> Response:
    """Validate, translate and forward one chat completion request.

    Returns a StreamingResponse of OpenAI chunks when the caller asked for
    ``"stream": true`` and a single chat completion otherwise.
    """
    body = await request.body()
    payload = parse_chat_request(body)
    model = payload["model"]
    is_stream = payload.get("stream") is True
    logger.info("Processing request for model %s, stream=%s", model, is_stream)

    client: UpstreamClient = request.app.state.upstream_client
    resp = await client.send(to_upstream_request(payload))

    if is_stream:
        return _stream_response(client, resp, model, request)
    return await _aggregate_response(client, resp, model)


async def chat_completions(request: Request) -> Response:
    """Chat completions endpoint - OpenAI compatible.

    POST /v1/chat/completions
    """
    logger.info("Received chat completions request")
    try:
        return await handle_chat_request(request)
    except ClientDisconnect:
        logger.warning("Client disconnected while sending the request body")
        return Response(status_code=499)
    except ProxyError as exc:
        logger.warning("Chat completions request failed (%s): %s", exc.status_code, exc.message)
        return proxy_error_response(exc)
    except Exception:
        logger.exception("Unexpected error in chat completions handler")
        return error_response(INTERNAL_ERROR_MESSAGE, 500)
