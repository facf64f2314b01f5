"""Reason domain model and the builder used to construct it."""

from collections.abc import Callable
from dataclasses import dataclass, replace

DEFAULT_STATUS = 500


@dataclass(frozen=True)
class Reason:
    """Why a request was aborted: the cause, the HTTP status and an optional explanation.

    An empty explanation is omitted from any rendered output.
    """

    cause: Exception
    status: int = DEFAULT_STATUS
    explanation: str = ""

    def __str__(self) -> str:
        return str(self.cause)

    def unwrap(self) -> Exception:
        """Return the underlying cause."""
        return self.cause

    def is_caused_by(self, exc_type: type[BaseException]) -> bool:
        """Check whether any link of the cause chain is an instance of exc_type.

        Follows the cause first, then each exception's ``__cause__`` or
        ``__context__``.
        """
        seen: set[int] = set()
        current: BaseException | None = self.unwrap()
        while current is not None and id(current) not in seen:
            if isinstance(current, exc_type):
                return True
            seen.add(id(current))
            current = current.__cause__ or current.__context__
        return False


Detail = Callable[[Reason], Reason]


def with_status(status: int) -> Detail:
    """Set an explicit HTTP status code on the Reason."""

    def apply(reason: Reason) -> Reason:
        return replace(reason, status=status)

    return apply


def with_explanation(explanation: str) -> Detail:
    """Set a human-readable explanation on the Reason."""

    def apply(reason: Reason) -> Reason:
        return replace(reason, explanation=explanation)

    return apply


def because(cause: Exception, *details: Detail) -> Reason:
    """Describe why a request is being aborted.

    Unless a status is set with ``with_status``, 500 Internal Server Error is
    assumed. Details are applied in order, so the last one to set a field wins.

    Args:
        cause: The underlying error.
        *details: Modifiers such as ``with_status`` and ``with_explanation``.

    Returns:
        The built Reason.
    """
    reason = Reason(cause=cause)
    for detail in details:
        reason = detail(reason)
    return reason
