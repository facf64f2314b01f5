"""Adapters layer - renderers, configuration and Starlette integration."""

from http_abort.adapters.config import RecoveryConfig
from http_abort.adapters.renderers import (
    render_as_json,
    render_as_json_with_status,
    render_status_only,
)
from http_abort.adapters.web import GracefulMiddleware, gracefully, gracefully_render

__all__ = [
    "GracefulMiddleware",
    "RecoveryConfig",
    "gracefully",
    "gracefully_render",
    "render_as_json",
    "render_as_json_with_status",
    "render_status_only",
]
