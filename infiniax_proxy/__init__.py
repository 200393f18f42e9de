"""infiniax-proxy - OpenAI-compatible gateway for infiniax.ai

Accepts OpenAI Chat Completions requests, forwards them to the infiniax
chat stream endpoint, and translates the reply back, either as an OpenAI
SSE stream or as a single chat completion.

Example:
    >>> from infiniax_proxy import create_app, load_settings
    >>> import uvicorn
    >>> uvicorn.run(create_app(load_settings()), host="0.0.0.0", port=3000)
"""

__version__ = "1.0.0"

from .config_loader import UPSTREAM_URL, ProxySettings, load_settings
from .core import FragmentStreamAdapter, UpstreamClient, aggregate_completion, iter_fragments
from .logging import setup_logging
from .main import create_app, main

__all__ = [
    "__version__",
    "aggregate_completion",
    "create_app",
    "FragmentStreamAdapter",
    "iter_fragments",
    "load_settings",
    "main",
    "ProxySettings",
    "setup_logging",
    "UpstreamClient",
    "UPSTREAM_URL",
]
