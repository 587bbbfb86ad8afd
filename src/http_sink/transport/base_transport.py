"""
Abstract base transport for HTTP delivery.

Defines the blocking send primitive the sender relies on. This abstraction
allows swapping the underlying HTTP client (or a fake in tests) without
changing the retry loop.
"""

from abc import ABC, abstractmethod

import structlog

from http_sink.models.http_models import HttpRequest, HttpResponse


logger = structlog.get_logger(__name__)


class BaseTransport(ABC):
    """
    Abstract base class for HTTP transports.

    Responsibilities:
    - Transmit one concrete request and wait for the response
    - Return an HttpResponse for every completed round trip, even 4xx/5xx
    - Raise TransportError when no response could be obtained

    Does NOT handle:
    - Retries or backoff (that's HttpSender's job)
    - Deciding whether a status code is a failure (that's a ResponseHandler's job)

    Implementations must be safe for concurrent use from several threads.
    """

    @abstractmethod
    def transmit(self, request: HttpRequest) -> HttpResponse:
        """
        Send a request and block until the response arrives.

        Args:
            request: Concrete request for this attempt

        Returns:
            HttpResponse with status code, body and headers

        Raises:
            TransportConnectionError: Connection/I-O failure
            TransportTimeoutError: Transport timeout expired
        """
        pass

    def close(self) -> None:
        """
        Release underlying connections.

        Default implementation does nothing.
        """
        logger.debug("Closing transport", transport_class=self.__class__.__name__)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
