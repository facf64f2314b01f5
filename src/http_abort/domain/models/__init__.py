"""Domain models for aborting HTTP requests."""

from http_abort.domain.models.abort import Abort, abort
from http_abort.domain.models.abort_payload import (
    AbortPayload,
    CausePayload,
    ReasonPayload,
    TextPayload,
    UnknownPayload,
    classify_abort,
)
from http_abort.domain.models.reason import (
    DEFAULT_STATUS,
    Detail,
    Reason,
    because,
    with_explanation,
    with_status,
)

__all__ = [
    "DEFAULT_STATUS",
    "Abort",
    "AbortPayload",
    "CausePayload",
    "Detail",
    "Reason",
    "ReasonPayload",
    "TextPayload",
    "UnknownPayload",
    "abort",
    "because",
    "classify_abort",
    "with_explanation",
    "with_status",
]
