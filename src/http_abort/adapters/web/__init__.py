"""Web adapters - Starlette integration."""

from http_abort.adapters.web.graceful import (
    Endpoint,
    GracefulEndpoint,
    gracefully,
    gracefully_render,
)
from http_abort.adapters.web.graceful_middleware import GracefulMiddleware
from http_abort.adapters.web.recovery import Reasoner, attempt_to_recover
from http_abort.adapters.web.response_sink import BufferedResponseSink

__all__ = [
    "BufferedResponseSink",
    "Endpoint",
    "GracefulEndpoint",
    "GracefulMiddleware",
    "Reasoner",
    "attempt_to_recover",
    "gracefully",
    "gracefully_render",
]
