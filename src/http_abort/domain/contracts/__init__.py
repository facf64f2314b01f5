"""Domain contracts (protocols) for rendering aborted requests."""

from http_abort.domain.contracts.renderer import Renderer
from http_abort.domain.contracts.response_sink import ResponseSinkProtocol

__all__ = ["Renderer", "ResponseSinkProtocol"]
