"""Renderer strategies for aborted requests."""

from http_abort.adapters.renderers.json_body import (
    JSON_CONTENT_TYPE,
    ReasonDocument,
    render_as_json,
    render_as_json_with_status,
)
from http_abort.adapters.renderers.status_only import render_status_only

__all__ = [
    "JSON_CONTENT_TYPE",
    "ReasonDocument",
    "render_as_json",
    "render_as_json_with_status",
    "render_status_only",
]
