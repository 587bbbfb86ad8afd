"""
Response handlers for classifying delivered responses.

This module implements the Strategy Pattern for response classification.
The sender hands every received response to a handler; returning normally
accepts the response, raising ResponseRejected fails the send call without
consuming retries.

Handlers:
    1. OnHttpErrorResponseHandler: Reject 4xx/5xx (and codes above 599), accept the rest (default)
    2. AcceptAllResponseHandler: Accept every response
    3. StatusCodeResponseHandler: Accept only an explicit set of status codes
"""

from typing import Iterable, Protocol

import structlog

from http_sink.models.http_models import HttpResponse
from http_sink.sender.exceptions import ResponseRejected

logger = structlog.get_logger(__name__)


class ResponseHandler(Protocol):
    """
    Protocol for response handlers.

    Handlers are called once per response received, never for transport
    failures. They must not retry; the verdict is final for the send call.
    """

    def on_response(self, response: HttpResponse, remaining_retries: int) -> None:
        """
        Accept or reject a response.

        Args:
            response: Response received for the current attempt
            remaining_retries: Retry budget left at this attempt

        Raises:
            ResponseRejected: The response counts as a delivery failure
        """
        ...


class OnHttpErrorResponseHandler:
    """
    Reject client (4xx) and server (5xx) error responses, along with any
    non-standard status above 599.

    Use case: Default delivery, where any error status must surface to the
    caller instead of being masked as a transient failure.
    """

    def on_response(self, response: HttpResponse, remaining_retries: int) -> None:
        if response.is_error:
            logger.warning(
                "Server replied with an error status, rejecting",
                status_code=response.status_code,
                body=response.body,
                remaining_retries=remaining_retries,
            )
            raise ResponseRejected(response, remaining_retries)


class AcceptAllResponseHandler:
    """Accept every response, logging error statuses."""

    def on_response(self, response: HttpResponse, remaining_retries: int) -> None:
        if response.is_error:
            logger.info(
                "Accepting error response",
                status_code=response.status_code,
                remaining_retries=remaining_retries,
            )


class StatusCodeResponseHandler:
    """
    Accept only an explicit set of status codes.

    Use case: Endpoints where a 3xx or 1xx reply also means the payload was
    not taken, e.g. ``StatusCodeResponseHandler(range(200, 300))``.
    """

    def __init__(self, accepted_status_codes: Iterable[int]):
        """
        Initialize handler.

        Args:
            accepted_status_codes: Status codes that mean success
        """
        self.accepted_status_codes = frozenset(accepted_status_codes)
        if not self.accepted_status_codes:
            raise ValueError("accepted_status_codes must not be empty")

    def on_response(self, response: HttpResponse, remaining_retries: int) -> None:
        if response.status_code not in self.accepted_status_codes:
            logger.warning(
                "Server replied with an unexpected status, rejecting",
                status_code=response.status_code,
                remaining_retries=remaining_retries,
            )
            raise ResponseRejected(response, remaining_retries)


ON_HTTP_ERROR_RESPONSE_HANDLER: ResponseHandler = OnHttpErrorResponseHandler()
