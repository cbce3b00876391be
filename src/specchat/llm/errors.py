"""Exceptions raised by specchat.

Completion clients report every failure as a :class:`RequestFailure`
subclass so callers can tell transport problems, service errors and
unusable payloads apart.
"""


class SpecchatError(Exception):
    """Base class for specchat errors."""


class RequestFailure(SpecchatError):
    """A completion request did not produce usable text."""


class NetworkFailure(RequestFailure):
    """Transport-level error: connection refused, timeout, broken stream."""


class ServiceFailure(RequestFailure):
    """The completion service answered with a non-success status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedResponse(RequestFailure):
    """The response body did not contain the expected text field."""
