"""Service status and fallback routes."""

from fastapi import Request
from fastapi.responses import JSONResponse

from ... import __version__
from ..errors import NOT_FOUND_MESSAGE, error_response

SERVICE_NAME = "infiniax-proxy"


async def root() -> dict:
    """Health check.

    GET /
    """
    return {"status": "ok", "service": SERVICE_NAME, "version": __version__}


async def not_found(request: Request) -> JSONResponse:
    """Any route or method not handled above."""
    return error_response(NOT_FOUND_MESSAGE, 404)
