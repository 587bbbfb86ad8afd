"""
HTTP sender with fixed-backoff retries.

This module delivers request payloads to a remote HTTP endpoint:

1. **Header templating**: ${unix-timestamp} resolved before every attempt
2. **Transport retry**: Fixed backoff, up to MAX_RETRIES extra attempts
3. **Response handling**: Pluggable handler accepts or rejects responses
4. **Terminal errors**: RetriesExhausted, DeliveryInterrupted, ResponseRejected

Main Components:
    - HttpSender: Retry loop and send entry points
    - ResponseHandler: Protocol for response classification
    - DeliveryMetadata: Attempt history attached to terminal errors
    - refresh_headers: Pure header templating function

Usage:
    >>> from http_sink.sender import HttpSender
    >>> sender = HttpSender(settings, request_builder, transport)
    >>> response = sender.send('{"id": 1}')
"""

from http_sink.sender.engine import HttpSender
from http_sink.sender.exceptions import (
    DeliveryError,
    DeliveryInterrupted,
    ResponseRejected,
    RetriesExhausted,
)
from http_sink.sender.handlers import (
    ON_HTTP_ERROR_RESPONSE_HANDLER,
    AcceptAllResponseHandler,
    OnHttpErrorResponseHandler,
    ResponseHandler,
    StatusCodeResponseHandler,
)
from http_sink.sender.headers import (
    UNIX_TIMESTAMP_PLACEHOLDER,
    build_request,
    refresh_headers,
)
from http_sink.sender.metadata import DeliveryMetadata

__all__ = [
    "HttpSender",
    "DeliveryError",
    "DeliveryInterrupted",
    "ResponseRejected",
    "RetriesExhausted",
    "ResponseHandler",
    "OnHttpErrorResponseHandler",
    "AcceptAllResponseHandler",
    "StatusCodeResponseHandler",
    "ON_HTTP_ERROR_RESPONSE_HANDLER",
    "UNIX_TIMESTAMP_PLACEHOLDER",
    "build_request",
    "refresh_headers",
    "DeliveryMetadata",
]
