"""API routes for the proxy."""

from .chat import chat_completions, handle_chat_request, parse_chat_request
from .health import not_found, root
from .models import list_models

__all__ = [
    "chat_completions",
    "handle_chat_request",
    "list_models",
    "not_found",
    "parse_chat_request",
    "root",
]
