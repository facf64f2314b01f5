"""Recovery routine that turns an aborted request into a rendered response."""

import logging
from collections.abc import Callable

from starlette.responses import Response

from http_abort.adapters.web.response_sink import BufferedResponseSink
from http_abort.domain.contracts.renderer import Renderer
from http_abort.domain.models.abort_payload import (
    AbortPayload,
    CausePayload,
    ReasonPayload,
    TextPayload,
    UnknownPayload,
    classify_abort,
)
from http_abort.domain.models.reason import Reason, because

logger = logging.getLogger(__name__)

# Converts a cause into a Reason. ``because`` is a Reasoner.
Reasoner = Callable[[Exception], Reason]


def _reason_for(payload: AbortPayload, reasoner: Reasoner) -> Reason:
    if isinstance(payload, ReasonPayload):
        return payload.reason
    if isinstance(payload, CausePayload):
        return reasoner(payload.cause)
    if isinstance(payload, TextPayload):
        return reasoner(RuntimeError(payload.text))
    raise TypeError(f"Cannot build a Reason from {payload!r}")


def attempt_to_recover(
    exc: BaseException,
    render: Renderer,
    reasoner: Reasoner = because,
) -> Response | None:
    """Render a useful response for an aborted request handler.

    Only payloads this package knows what to do with are rendered: a Reason,
    an error or a plain string. Anything else was raised for a pretty good
    reason, so None is returned and the caller must re-raise the original
    exception. Errors raised by the renderer propagate.

    Args:
        exc: The exception that ended the handler.
        render: Renderer writing the Reason to the response.
        reasoner: Converts a bare cause into a Reason.

    Returns:
        The rendered response, or None if the abort must propagate.
    """
    payload = classify_abort(exc)
    if isinstance(payload, UnknownPayload):
        logger.debug(f"Not recovering from {type(payload.original).__name__}, re-raising")
        return None

    reason = _reason_for(payload, reasoner)
    sink = BufferedResponseSink()
    render(sink, reason)
    logger.debug(f"Recovered aborted request, rendering status {reason.status}")
    return sink.to_response()
