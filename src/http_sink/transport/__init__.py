"""
HTTP transport abstraction and implementations.

Components:
- BaseTransport: Abstract blocking send primitive
- HttpxTransport: Implementation backed by httpx.Client
- exceptions: Transport-level failures (the only retried errors)
"""

from http_sink.transport.base_transport import BaseTransport
from http_sink.transport.httpx_transport import HttpxTransport
from http_sink.transport.exceptions import (
    TransportError,
    TransportConnectionError,
    TransportTimeoutError,
)

__all__ = [
    "BaseTransport",
    "HttpxTransport",
    "TransportError",
    "TransportConnectionError",
    "TransportTimeoutError",
]
