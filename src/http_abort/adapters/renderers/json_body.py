"""Renderers that serialize a Reason as a JSON document."""

from pydantic import BaseModel, ConfigDict

from http_abort.domain.contracts.response_sink import ResponseSinkProtocol
from http_abort.domain.models.reason import Reason

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


class ReasonDocument(BaseModel):
    """Wire form of a Reason. Unset fields are left out of the document."""

    model_config = ConfigDict(frozen=True)

    error: str
    status: int | None = None
    explanation: str | None = None

    @classmethod
    def from_reason(cls, reason: Reason, include_status: bool = False) -> "ReasonDocument":
        """Build the document for a Reason, dropping an empty explanation."""
        return cls(
            error=str(reason),
            status=reason.status if include_status else None,
            explanation=reason.explanation or None,
        )

    def to_json_bytes(self) -> bytes:
        """Serialize as compact JSON terminated by a newline."""
        return self.model_dump_json(exclude_none=True).encode("utf-8") + b"\n"


def _render_document(sink: ResponseSinkProtocol, reason: Reason, document: ReasonDocument) -> None:
    sink.set_header("Content-Type", JSON_CONTENT_TYPE)
    sink.write_status(reason.status)
    sink.write(document.to_json_bytes())


def render_as_json(sink: ResponseSinkProtocol, reason: Reason) -> None:
    """Render a Reason as ``{"error": ..., "explanation": ...}``.

    The status is only conveyed by the status line. Errors raised while
    serializing propagate to the caller.
    """
    document = ReasonDocument.from_reason(reason)
    _render_document(sink, reason, document)


def render_as_json_with_status(sink: ResponseSinkProtocol, reason: Reason) -> None:
    """Render a Reason as ``{"error": ..., "status": ..., "explanation": ...}``."""
    document = ReasonDocument.from_reason(reason, include_status=True)
    _render_document(sink, reason, document)
