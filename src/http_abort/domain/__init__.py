"""Domain layer - reasons, abort signals and rendering contracts."""

from http_abort.domain.contracts import Renderer, ResponseSinkProtocol
from http_abort.domain.models import (
    Abort,
    Reason,
    abort,
    because,
    classify_abort,
    with_explanation,
    with_status,
)

__all__ = [
    "Abort",
    "Reason",
    "Renderer",
    "ResponseSinkProtocol",
    "abort",
    "because",
    "classify_abort",
    "with_explanation",
    "with_status",
]
