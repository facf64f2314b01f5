"""Contract for presenting a Reason to the client."""

from collections.abc import Callable

from http_abort.domain.contracts.response_sink import ResponseSinkProtocol
from http_abort.domain.models.reason import Reason

# A renderer may raise if it cannot complete the write. Nothing recovers from that.
Renderer = Callable[[ResponseSinkProtocol, Reason], None]
