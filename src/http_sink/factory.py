"""
Sender wiring.

Builds an HttpSender from settings, the way the host pipeline creates one
per task.
"""

from typing import Optional

import structlog

from http_sink.config import Settings
from http_sink.logging_config import configure_logging
from http_sink.request_builder import get_request_builder
from http_sink.sender.engine import HttpSender
from http_sink.transport.base_transport import BaseTransport
from http_sink.transport.httpx_transport import HttpxTransport

logger = structlog.get_logger(__name__)


def create_http_sender(
    settings: Optional[Settings] = None,
    transport: Optional[BaseTransport] = None,
) -> HttpSender:
    """
    Create an HttpSender for the configured endpoint.

    Configures logging from LOG_LEVEL and ENVIRONMENT before anything else is
    built.

    Args:
        settings: Application settings (loaded from the environment if omitted)
        transport: Transport to use (HttpxTransport with HTTP_TIMEOUT if omitted)

    Returns:
        Ready-to-use HttpSender
    """
    if settings is None:
        settings = Settings()

    configure_logging(settings.LOG_LEVEL, settings.ENVIRONMENT)

    if transport is None:
        transport = HttpxTransport(timeout=float(settings.HTTP_TIMEOUT))

    logger.debug("Creating HttpSender", url=settings.HTTP_URL)
    return HttpSender(settings, get_request_builder(settings), transport)
