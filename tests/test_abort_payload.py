"""Tests for classifying exceptions that ended a request handler."""

import asyncio

import pytest

from http_abort.domain.models import (
    Abort,
    CausePayload,
    ReasonPayload,
    TextPayload,
    UnknownPayload,
    abort,
    because,
    classify_abort,
    with_status,
)

ERR_FOR_TESTING = LookupError("rut-ro raggy")


class TestClassifyAbort:
    """Behavior tests for classify_abort."""

    def test_when_abort_carries_reason_then_reason_payload(self) -> None:
        """Given Abort with a Reason, when classifying, then the Reason is kept as is."""
        reason = because(ERR_FOR_TESTING, with_status(400))

        assert classify_abort(Abort(reason)) == ReasonPayload(reason=reason)

    def test_when_abort_carries_error_then_cause_payload(self) -> None:
        """Given Abort with an error, when classifying, then the error is the cause."""
        assert classify_abort(Abort(ERR_FOR_TESTING)) == CausePayload(cause=ERR_FOR_TESTING)

    def test_when_abort_carries_string_then_text_payload(self) -> None:
        """Given Abort with a string, when classifying, then it becomes a text payload."""
        assert classify_abort(Abort("this is a string")) == TextPayload(text="this is a string")

    def test_when_abort_carries_none_then_unknown(self) -> None:
        """Given Abort(None), when classifying, then the original abort is unknown."""
        exc = Abort(None)

        assert classify_abort(exc) == UnknownPayload(original=exc)

    def test_when_abort_carries_arbitrary_object_then_unknown(self) -> None:
        """Given Abort with an unrecognized object, when classifying, then it is unknown."""
        exc = Abort({"this would be weird": "but might as well test for it"})

        assert classify_abort(exc) == UnknownPayload(original=exc)

    def test_when_abort_carries_base_exception_then_unknown(self) -> None:
        """Given Abort with a SystemExit payload, when classifying, then it is unknown."""
        exc = Abort(SystemExit(1))

        assert isinstance(classify_abort(exc), UnknownPayload)

    def test_when_plain_exception_raised_then_it_is_the_cause(self) -> None:
        """Given a plain ValueError, when classifying, then it is the cause."""
        exc = ValueError("bad value")

        assert classify_abort(exc) == CausePayload(cause=exc)

    @pytest.mark.parametrize(
        "exc",
        [KeyboardInterrupt(), SystemExit(2), asyncio.CancelledError()],
    )
    def test_when_not_an_exception_subclass_then_unknown(self, exc: BaseException) -> None:
        """Given a process-level signal, when classifying, then it is unknown."""
        assert classify_abort(exc) == UnknownPayload(original=exc)


class TestAbortHelper:
    """Behavior tests for the abort helper."""

    def test_when_aborting_then_raises_abort_with_payload(self) -> None:
        """Given a payload, when aborting, then Abort carries it."""
        with pytest.raises(Abort) as exc_info:
            abort("oops")

        assert exc_info.value.payload == "oops"

    def test_when_aborting_with_reason_then_cause_is_chained(self) -> None:
        """Given a Reason, when aborting, then its cause is chained to the Abort."""
        reason = because(ERR_FOR_TESTING)

        with pytest.raises(Abort) as exc_info:
            abort(reason)

        assert exc_info.value.payload is reason
        assert exc_info.value.__cause__ is ERR_FOR_TESTING
