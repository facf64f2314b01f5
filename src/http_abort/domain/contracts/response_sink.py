"""Protocol for the response a renderer writes into."""

from typing import Protocol


class ResponseSinkProtocol(Protocol):
    """Minimal writable HTTP response."""

    def write_status(self, status: int) -> None:
        """Set the HTTP status code.

        Only the first call has an effect; later calls are ignored.

        Args:
            status: The HTTP status code.
        """
        ...

    def set_header(self, name: str, value: str) -> None:
        """Set a response header, replacing any previous value.

        Args:
            name: Header name.
            value: Header value.
        """
        ...

    def write(self, data: bytes) -> None:
        """Append bytes to the response body.

        Args:
            data: The bytes to append.
        """
        ...
