"""Response sink that buffers a rendered Reason into a Starlette response."""

from starlette.datastructures import MutableHeaders
from starlette.responses import Response

from http_abort.domain.contracts.response_sink import ResponseSinkProtocol

DEFAULT_RESPONSE_STATUS = 200


class BufferedResponseSink(ResponseSinkProtocol):
    """Collects status, headers and body written by a renderer."""

    def __init__(self) -> None:
        """Initialize an empty sink with no status written yet."""
        self.status: int | None = None
        self.headers = MutableHeaders()
        self.body = bytearray()

    def write_status(self, status: int) -> None:
        """Set the status code unless one was already written."""
        if self.status is None:
            self.status = status

    def set_header(self, name: str, value: str) -> None:
        """Set a header, replacing any previous value regardless of case."""
        self.headers[name] = value

    def write(self, data: bytes) -> None:
        """Append bytes to the body."""
        self.body.extend(data)

    def to_response(self) -> Response:
        """Build the Starlette response from what was written."""
        status = self.status if self.status is not None else DEFAULT_RESPONSE_STATUS
        return Response(content=bytes(self.body), status_code=status, headers=dict(self.headers))
