"""Main FastAPI application for the infiniax proxy."""

import argparse
import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

import httpx
import uvicorn
from fastapi import FastAPI

from . import __version__
from .api.routes import chat_completions, list_models, not_found, root
from .config_loader import UPSTREAM_URL, ProxySettings, load_settings
from .core import UpstreamClient
from .logging import setup_logging

logger = logging.getLogger("infiniax-proxy")

FALLBACK_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


def create_app(
    settings: Optional[ProxySettings] = None,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """Build the proxy application.

    Args:
        settings: Process settings; loaded from the environment when omitted.
        transport: Optional httpx transport for the upstream client, used by
            tests to stand in for infiniax.

    Returns:
        The configured FastAPI application. Its upstream client is closed
        when the application shuts down.
    """
    if settings is None:
        settings = load_settings()
    setup_logging(settings.log_level)
    upstream_client = UpstreamClient(settings, transport=transport)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("infiniax-proxy %s starting up", __version__)
        logger.info("Forwarding chat completions to %s", UPSTREAM_URL)
        if not settings.has_credential:
            logger.error("INFINIAX_COOKIE is not set; upstream calls will fail")
        try:
            yield
        finally:
            await upstream_client.aclose()
            logger.info("infiniax-proxy shut down")

    app = FastAPI(
        title="infiniax-proxy",
        version=__version__,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.upstream_client = upstream_client

    app.get("/")(root)
    app.post("/v1/chat/completions")(chat_completions)
    app.get("/v1/models")(list_models)
    # Registered last so the routes above win on a full path and method match
    app.api_route("/{path:path}", methods=FALLBACK_METHODS)(not_found)
    return app


def main(argv: Optional[list[str]] = None) -> None:
    """Run the proxy with uvicorn."""
    parser = argparse.ArgumentParser(description="OpenAI-compatible proxy for infiniax.ai")
    parser.add_argument("--host", help="Bind address (overrides HOST)")
    parser.add_argument("--port", type=int, help="Bind port (overrides PORT)")
    args = parser.parse_args(argv)

    settings = load_settings()
    setup_logging(settings.log_level)
    if not settings.has_credential:
        logger.error("Error: INFINIAX_COOKIE environment variable is not set.")
        sys.exit(1)

    host = args.host or settings.host
    port = args.port or settings.port
    logger.info("infiniax-proxy listening on %s:%s", host, port)
    uvicorn.run(
        create_app(settings),
        host=host,
        port=port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
