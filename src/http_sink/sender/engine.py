"""
HTTP sender with fixed-backoff retries.

This module implements the HttpSender that delivers one payload to the
configured endpoint. It provides a single retry loop shared by every send
entry point.

Retry Policy:
    - Transport failure (no response): wait RETRY_BACKOFF_MS, try again,
      up to MAX_RETRIES additional attempts
    - Response received: the response handler decides; a rejection is final
      and does not consume retries
    - Cancellation during a backoff wait: stop immediately

Usage:
    sender = HttpSender(settings, get_request_builder(settings), HttpxTransport())
    response = sender.send('{"id": 1}')
"""

import threading
import time
from typing import Optional

import structlog

from http_sink.config import Settings
from http_sink.converters import RecordValueConverter
from http_sink.models.http_models import HttpResponse, RequestTemplate
from http_sink.models.record_models import SinkRecord
from http_sink.monitoring.metrics import (
    delivery_attempts_total,
    delivery_failures_total,
    delivery_latency_seconds,
)
from http_sink.request_builder import RequestBuilder
from http_sink.sender.exceptions import (
    DeliveryInterrupted,
    ResponseRejected,
    RetriesExhausted,
)
from http_sink.sender.handlers import ON_HTTP_ERROR_RESPONSE_HANDLER, ResponseHandler
from http_sink.sender.headers import build_request
from http_sink.sender.metadata import DeliveryMetadata
from http_sink.transport.base_transport import BaseTransport
from http_sink.transport.exceptions import TransportError

logger = structlog.get_logger(__name__)


class HttpSender:
    """
    Deliver request bodies with bounded, fixed-backoff retries.

    One send call runs entirely on the calling thread: attempts never
    overlap and backoff is a blocking wait. Concurrent calls from different
    threads share only the transport and the settings.

    Attributes:
        settings: Application settings (MAX_RETRIES, RETRY_BACKOFF_MS)
        request_builder: Builds the request template for the endpoint
        transport: Blocking send primitive
    """

    def __init__(
        self,
        settings: Settings,
        request_builder: RequestBuilder,
        transport: BaseTransport,
    ):
        """
        Initialize sender.

        Args:
            settings: Application settings
            request_builder: Request template builder
            transport: Transport used for every attempt
        """
        self.settings = settings
        self.request_builder = request_builder
        self.transport = transport
        self._stop_event = threading.Event()

        logger.info(
            "HttpSender initialized",
            url=settings.HTTP_URL,
            max_retries=settings.MAX_RETRIES,
            retry_backoff_ms=settings.RETRY_BACKOFF_MS,
            transport=repr(transport),
        )

    def send(self, body: str) -> HttpResponse:
        """
        Send a literal body to the configured endpoint.

        Raises:
            ResponseRejected: Server replied with an error status
            DeliveryInterrupted: Stopped during a backoff wait
            RetriesExhausted: All attempts failed at the transport level
        """
        template = self.request_builder.build(self.settings).with_body(body)
        return self.send_with_retries(
            template, ON_HTTP_ERROR_RESPONSE_HANDLER, self.settings.MAX_RETRIES
        )

    def send_record(self, record: SinkRecord, converter: RecordValueConverter) -> HttpResponse:
        """
        Send a record: converted value as body, record headers as HTTP headers.

        Raises:
            TypeError: Converter does not support the record value
            ResponseRejected, DeliveryInterrupted, RetriesExhausted: As send()
        """
        template = (
            self.request_builder.build(self.settings)
            .with_body(converter.convert(record))
            .with_headers(record.header_items())
        )
        return self.send_with_retries(
            template, ON_HTTP_ERROR_RESPONSE_HANDLER, self.settings.MAX_RETRIES
        )

    def stop(self) -> None:
        """Interrupt any backoff wait of calls without their own cancel event."""
        logger.info("Stopping HttpSender")
        self._stop_event.set()

    def send_with_retries(
        self,
        template: RequestTemplate,
        handler: ResponseHandler,
        retries: int,
        cancel_event: Optional[threading.Event] = None,
    ) -> HttpResponse:
        """
        Deliver a request template, retrying transport failures.

        The same counter is the loop bound and the value handed to the
        handler: it starts at ``retries`` and drops by one per transport
        failure, so there are at most ``retries + 1`` attempts. Headers are
        re-templated before every attempt.

        Args:
            template: Request to deliver (never modified)
            handler: Decides whether a received response is a success
            retries: Additional attempts allowed after the first (>= 0)
            cancel_event: Interrupts backoff waits when set; defaults to the
                sender's stop event

        Returns:
            Response accepted by the handler

        Raises:
            ValueError: retries is negative
            ResponseRejected: Handler rejected a response (not retried)
            DeliveryInterrupted: cancel_event set during a backoff wait
            RetriesExhausted: Every attempt failed at the transport level
        """
        if retries < 0:
            raise ValueError(f"retries must be >= 0, got {retries}")
        if cancel_event is None:
            cancel_event = self._stop_event

        backoff_ms = self.settings.RETRY_BACKOFF_MS
        start_time = time.monotonic()
        remaining_retries = retries
        attempts = 0
        transport_errors: list[str] = []
        last_error: Optional[TransportError] = None

        while remaining_retries >= 0:
            request = build_request(template)
            attempts += 1

            try:
                response = self.transport.transmit(request)
            except TransportError as e:
                last_error = e
                transport_errors.append(type(e).__name__)
                delivery_attempts_total.labels(outcome="transport_error").inc()

                if remaining_retries == 0:
                    break

                logger.info(
                    "Sending failed, will retry",
                    backoff_ms=backoff_ms,
                    remaining_retries=remaining_retries,
                    attempt=attempts,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                if cancel_event.wait(backoff_ms / 1000.0):
                    metadata = self._build_metadata(
                        attempts, retries, start_time, transport_errors
                    )
                    logger.error(
                        "Sending interrupted during backoff, stopping",
                        total_attempts=attempts,
                        remaining_retries=remaining_retries,
                    )
                    delivery_failures_total.labels(reason="interrupted").inc()
                    delivery_latency_seconds.labels(success="false").observe(
                        metadata.total_latency_ms / 1000.0
                    )
                    raise DeliveryInterrupted(metadata) from e
                remaining_retries -= 1
                continue

            logger.debug(
                "Server replied",
                status_code=response.status_code,
                body=response.body,
                attempt=attempts,
            )

            try:
                handler.on_response(response, remaining_retries)
            except ResponseRejected:
                delivery_attempts_total.labels(outcome="rejected").inc()
                delivery_failures_total.labels(reason="rejected").inc()
                delivery_latency_seconds.labels(success="false").observe(
                    time.monotonic() - start_time
                )
                raise

            delivery_attempts_total.labels(outcome="success").inc()
            delivery_latency_seconds.labels(success="true").observe(
                time.monotonic() - start_time
            )
            if attempts > 1:
                logger.info(
                    "Sending succeeded after retries",
                    total_attempts=attempts,
                    status_code=response.status_code,
                )
            return response

        metadata = self._build_metadata(attempts, retries, start_time, transport_errors)
        logger.error(
            "Sending failed and no retries remain, stopping",
            total_attempts=attempts,
            transport_errors=transport_errors,
            total_latency_ms=metadata.total_latency_ms,
        )
        delivery_failures_total.labels(reason="retries_exhausted").inc()
        delivery_latency_seconds.labels(success="false").observe(
            metadata.total_latency_ms / 1000.0
        )
        raise RetriesExhausted(metadata, last_error)

    def _build_metadata(
        self,
        attempts: int,
        retries: int,
        start_time: float,
        transport_errors: list[str],
    ) -> DeliveryMetadata:
        return DeliveryMetadata(
            total_attempts=attempts,
            max_retries=retries,
            backoff_ms=self.settings.RETRY_BACKOFF_MS,
            total_latency_ms=int((time.monotonic() - start_time) * 1000),
            transport_errors=list(transport_errors),
        )

    def close(self) -> None:
        """Close the underlying transport."""
        self.transport.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
