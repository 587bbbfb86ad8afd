"""
Custom exceptions for the transport layer.

A transport error means no HTTP response was obtained at all. These are the
only failures the sender retries; a response with an error status is not a
transport error.
"""


class TransportError(Exception):
    """
    Base exception for all transport-level failures.

    Catching this covers every failure where the request bytes may not have
    reached the server or no response came back.
    """
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class TransportConnectionError(TransportError):
    """
    Raised when the connection fails or breaks mid-exchange.

    Includes refused connections, DNS failures, resets and protocol errors.
    """
    pass


class TransportTimeoutError(TransportError):
    """Raised when the transport's own timeout expires before a response."""
    pass
