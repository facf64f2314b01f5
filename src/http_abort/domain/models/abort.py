"""Abort signal raised by request handlers."""

from typing import Any, NoReturn

from http_abort.domain.models.reason import Reason


class Abort(Exception):
    """Abrupt end of request handling carrying an arbitrary payload.

    Payloads the recovery wrapper understands are a Reason, an Exception
    instance and a plain string. Anything else is re-raised by the wrapper.
    """

    def __init__(self, payload: Any) -> None:
        super().__init__(payload)
        self.payload = payload


def abort(payload: Any) -> NoReturn:
    """Abort the current request with the given payload.

    When the payload is a Reason its cause is chained so tracebacks show it.
    """
    if isinstance(payload, Reason):
        raise Abort(payload) from payload.cause
    raise Abort(payload)
