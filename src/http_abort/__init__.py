"""Render aborted HTTP requests as well-formed responses."""

from http_abort.adapters import (
    GracefulMiddleware,
    RecoveryConfig,
    gracefully,
    gracefully_render,
    render_as_json,
    render_as_json_with_status,
    render_status_only,
)
from http_abort.domain import (
    Abort,
    Reason,
    Renderer,
    ResponseSinkProtocol,
    abort,
    because,
    with_explanation,
    with_status,
)

__all__ = [
    "Abort",
    "GracefulMiddleware",
    "Reason",
    "RecoveryConfig",
    "Renderer",
    "ResponseSinkProtocol",
    "abort",
    "because",
    "gracefully",
    "gracefully_render",
    "render_as_json",
    "render_as_json_with_status",
    "render_status_only",
    "with_explanation",
    "with_status",
]
