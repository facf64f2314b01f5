"""Classification of whatever ended a request handler abruptly."""

from dataclasses import dataclass

from http_abort.domain.models.abort import Abort
from http_abort.domain.models.reason import Reason


@dataclass(frozen=True)
class ReasonPayload:
    """The handler aborted with an already built Reason."""

    reason: Reason


@dataclass(frozen=True)
class CausePayload:
    """The handler aborted with an error value."""

    cause: Exception


@dataclass(frozen=True)
class TextPayload:
    """The handler aborted with a plain message."""

    text: str


@dataclass(frozen=True)
class UnknownPayload:
    """Anything the recovery wrapper refuses to handle."""

    original: BaseException


AbortPayload = ReasonPayload | CausePayload | TextPayload | UnknownPayload


def _classify_abort_payload(exc: Abort) -> AbortPayload:
    payload = exc.payload
    if isinstance(payload, Reason):
        return ReasonPayload(reason=payload)
    if isinstance(payload, Exception):
        return CausePayload(cause=payload)
    if isinstance(payload, str):
        return TextPayload(text=payload)
    return UnknownPayload(original=exc)


def classify_abort(exc: BaseException) -> AbortPayload:
    """Classify an exception that escaped a request handler.

    ``Abort`` is unpacked by its payload. Any other ``Exception`` is itself the
    cause. Exceptions outside the ``Exception`` hierarchy (``SystemExit``,
    ``KeyboardInterrupt``, task cancellation) are always unknown.
    """
    if isinstance(exc, Abort):
        return _classify_abort_payload(exc)
    if isinstance(exc, Exception):
        return CausePayload(cause=exc)
    return UnknownPayload(original=exc)
