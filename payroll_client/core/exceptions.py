"""
Exceptions raised by the payroll client.

- RequestError: the server answered with a non-success status
- TransportError: the request never produced a usable response
  (network failure, timeout, malformed JSON)

Local payroll validation never raises; see PayrollDataProcessor.
"""

from typing import Any, Optional

DEFAULT_ERROR_MESSAGE = "Request failed"


class PayrollClientError(Exception):
    """Base class for all payroll client errors."""


class RequestError(PayrollClientError):
    """Non-success HTTP status. Message comes from the server's `error` field."""

    def __init__(
        self,
        message: str = DEFAULT_ERROR_MESSAGE,
        status_code: Optional[int] = None,
        payload: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload

    def __repr__(self) -> str:
        return f"RequestError(status_code={self.status_code}, message={self.message!r})"


class TransportError(PayrollClientError):
    """Network unreachable, timed out, or the response body was not JSON."""
