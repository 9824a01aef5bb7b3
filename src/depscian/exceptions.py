"""Exceptions raised by the Depscian API client.

Every facade call either returns a decoded payload or raises one of the
exceptions below. ``NotFoundError`` is the one callers are expected to check
for; the others describe why a request could not produce a usable result.
"""


class DepscianError(Exception):
    """Base exception for Depscian client errors."""

    pass


class ClientExecutionError(DepscianError):
    """Raised when a request fails before an HTTP status was obtained.

    Covers connection, DNS, timeout and protocol failures. The underlying
    exception is available as ``__cause__``.
    """

    pass


class NotFoundError(DepscianError):
    """Raised when the requested resource has no usable result.

    Used both for HTTP 404 and for successful responses whose body is empty
    or does not match the expected shape.
    """

    def __init__(self, message: str = "not found", status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class StatusError(DepscianError):
    """Raised when the API answers with a non-2xx status other than 404."""

    def __init__(self, message: str, status_code: int, status_text: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.status_text = status_text


class ConfigurationError(DepscianError):
    """Raised when a client option cannot be applied."""

    pass
