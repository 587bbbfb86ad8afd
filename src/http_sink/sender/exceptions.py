"""
Delivery exceptions.

Every send call ends either with an accepted response or with exactly one of
the terminal errors below:

- ResponseRejected: a response came back and the handler refused it
- DeliveryInterrupted: cancellation arrived while waiting to retry
- RetriesExhausted: every attempt failed at the transport level
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from http_sink.models.http_models import HttpResponse
    from http_sink.sender.metadata import DeliveryMetadata
    from http_sink.transport.exceptions import TransportError


class DeliveryError(Exception):
    """
    Base exception for terminal delivery failures.

    Catch this to handle any outcome of send() other than success.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Initialize delivery error.

        Args:
            message: Human-readable error description
            details: Structured error data for logging/metrics
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ResponseRejected(DeliveryError):
    """
    Raised by a response handler when a received response is a failure.

    The sender never catches or retries this; whether to resend is up to the
    caller.

    Attributes:
        response: The rejected response
        remaining_retries: Retry budget left when the response arrived
    """

    def __init__(self, response: "HttpResponse", remaining_retries: int):
        self.response = response
        self.remaining_retries = remaining_retries

        super().__init__(
            f"Server replied with an error status {response.status_code}",
            details={
                "status_code": response.status_code,
                "body": response.body[:500],
                "remaining_retries": remaining_retries,
            },
        )


class DeliveryInterrupted(DeliveryError):
    """
    Raised when cancellation is signalled during a backoff wait.

    Remaining retries are abandoned.
    """

    def __init__(self, metadata: "DeliveryMetadata"):
        self.metadata = metadata

        super().__init__(
            f"Sending interrupted after {metadata.total_attempts} attempts, stopping",
            details={"total_attempts": metadata.total_attempts},
        )


class RetriesExhausted(DeliveryError):
    """
    Raised when every attempt failed at the transport level.

    Attributes:
        metadata: Attempt history
        last_error: Transport error from the final attempt
    """

    def __init__(self, metadata: "DeliveryMetadata", last_error: "TransportError"):
        self.metadata = metadata
        self.last_error = last_error

        super().__init__(
            f"Sending failed and no retries remain after {metadata.total_attempts} attempts",
            details={
                "total_attempts": metadata.total_attempts,
                "transport_errors": metadata.transport_errors,
                "final_error": type(last_error).__name__,
            },
        )
