"""Standard error responses: ``{"error": {"message": ...}}``."""

from fastapi.responses import JSONResponse

from ..core.exceptions import ProxyError
from ..types import ErrorBody

INTERNAL_ERROR_MESSAGE = "Internal server error"
NOT_FOUND_MESSAGE = "Not Found"


def error_body(message: str) -> ErrorBody:
    return {"error": {"message": message}}


def error_response(message: str, status_code: int) -> JSONResponse:
    """Create a standardized error response in OpenAI error format."""
    return JSONResponse(error_body(message), status_code=status_code)


def proxy_error_response(exc: ProxyError) -> JSONResponse:
    return error_response(exc.message, exc.status_code)
