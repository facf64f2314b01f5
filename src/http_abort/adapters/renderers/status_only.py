"""Renderer that answers with the status code alone."""

from http_abort.domain.contracts.response_sink import ResponseSinkProtocol
from http_abort.domain.models.reason import Reason


def render_status_only(sink: ResponseSinkProtocol, reason: Reason) -> None:
    """Send the Reason status to the client, and nothing else."""
    sink.write_status(reason.status)
