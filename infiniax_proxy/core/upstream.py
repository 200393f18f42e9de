"""HTTP client for the infiniax chat stream endpoint."""

from __future__ import annotations

import json
import logging
from typing import AsyncIterator, Awaitable, Callable, Optional

import httpx

from ..config_loader import UPSTREAM_URL, ProxySettings
from ..types import UpstreamRequest
from .exceptions import ClientDisconnectedError, UpstreamAuthError, UpstreamError

logger = logging.getLogger("infiniax-proxy")

AUTH_FAILURE_STATUSES = {401, 403}
# Success statuses that never carry a body
NO_BODY_STATUSES = {204, 205}


def format_httpx_error(exc: httpx.HTTPError, url: Optional[str] = None) -> str:
    """Produce a detailed description of an httpx error for the logs."""
    parts = [exc.__class__.__name__]
    message = str(exc).strip()
    if message:
        parts.append(message)
    if url:
        parts.append(f"url={url}")
    return "; ".join(parts)


class UpstreamClient:
    """Sends exactly one POST per call to infiniax; never retries.

    The client does not interpret the body. ``send`` returns the open
    streaming response and the caller must close it.
    """

    def __init__(
        self,
        settings: ProxySettings,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        url: str = UPSTREAM_URL,
    ) -> None:
        self.settings = settings
        self.url = url
        timeout = settings.timeout
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(connect=timeout, read=None, write=timeout, pool=timeout),
            transport=transport,
            follow_redirects=True,
        )

    def build_headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Cookie": self.settings.cookie,
        }

    async def send(self, body: UpstreamRequest) -> httpx.Response:
        """POST ``body`` and return the streaming response.

        Raises:
            UpstreamAuthError: infiniax answered 401 or 403.
            UpstreamError: transport failure, any other non-2xx status, or
                a success status without a body.
        """
        content = json.dumps(body, ensure_ascii=False).encode("utf-8")
        request = self._client.build_request(
            "POST", self.url, headers=self.build_headers(), content=content
        )
        logger.debug("Sending upstream request to %s (%d bytes)", self.url, len(content))
        try:
            resp = await self._client.send(request, stream=True)
        except httpx.HTTPError as exc:
            logger.error("Upstream request failed: %s", format_httpx_error(exc, self.url))
            raise UpstreamError() from exc

        if not resp.is_success:
            await self._discard(resp)
            logger.warning("Upstream returned error status %s", resp.status_code)
            if resp.status_code in AUTH_FAILURE_STATUSES:
                raise UpstreamAuthError()
            raise UpstreamError()

        if resp.status_code in NO_BODY_STATUSES:
            await resp.aclose()
            logger.warning("Upstream returned status %s without a body", resp.status_code)
            raise UpstreamError("No response body from upstream")

        logger.debug("Upstream responded with status %s", resp.status_code)
        return resp

    async def iter_bytes(
        self,
        resp: httpx.Response,
        disconnect_checker: Optional[Callable[[], Awaitable[bool]]] = None,
    ) -> AsyncIterator[bytes]:
        """Yield raw body blocks as they arrive.

        The disconnect checker is polled before every read so a vanished
        caller stops upstream consumption.
        """
        stream = resp.aiter_bytes()
        while True:
            if disconnect_checker is not None and await disconnect_checker():
                raise ClientDisconnectedError()
            try:
                chunk = await stream.__anext__()
            except StopAsyncIteration:
                break
            except httpx.HTTPError as exc:
                logger.error(
                    "Upstream stream interrupted: %s", format_httpx_error(exc, self.url)
                )
                raise UpstreamError() from exc
            if chunk:
                yield chunk

    async def aclose(self) -> None:
        await self._client.aclose()

    @staticmethod
    async def _discard(resp: httpx.Response) -> None:
        try:
            await resp.aread()
        except httpx.HTTPError as exc:
            logger.debug("Failed to drain upstream error body: %s", exc)
        finally:
            await resp.aclose()
