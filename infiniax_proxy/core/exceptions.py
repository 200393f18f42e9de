"""Core exceptions for the proxy."""


class ProxyError(Exception):
    """Base exception for proxy errors.

    ``status_code`` is the HTTP status the caller sees when the error is
    rendered; ``message`` is the caller-facing text.
    """

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidRequestError(ProxyError):
    """Raised when an incoming request is invalid."""

    status_code = 400


class UpstreamAuthError(ProxyError):
    """Raised when infiniax rejects the configured credential (401/403)."""

    status_code = 401

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message)


class UpstreamError(ProxyError):
    """Raised for any other upstream failure: transport, status, or body."""

    status_code = 502

    def __init__(self, message: str = "Upstream error") -> None:
        super().__init__(message)


class ClientDisconnectedError(ProxyError):
    """Raised when the downstream caller went away mid-stream."""

    def __init__(self, message: str = "client disconnected") -> None:
        super().__init__(message)
