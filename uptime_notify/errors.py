"""Errors raised while delivering a notification."""


class NotificationError(Exception):
    """Base class for every failure a provider's send() can raise."""


class InvalidResponseError(NotificationError):
    """The remote service returned no interpretable status or payload."""


class HttpStatusError(NotificationError):
    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class TransportError(NotificationError):
    """The HTTP call itself failed (DNS, connect, timeout, malformed request).

    The underlying httpx exception is kept as ``__cause__``.
    """
