"""
Request template builders.

A request builder turns the current settings into the RequestTemplate that
the sender attaches a body to. Header values are copied verbatim; any
${unix-timestamp} placeholder is resolved later, per attempt.
"""

from typing import Protocol

import structlog

from http_sink.config import Settings
from http_sink.models.http_models import Headers, RequestTemplate

logger = structlog.get_logger(__name__)


class RequestBuilder(Protocol):
    """Protocol for request template builders."""

    def build(self, settings: Settings) -> RequestTemplate:
        """Build the request template for the configured endpoint."""
        ...


class DefaultRequestBuilder:
    """
    Build a POST template with content type and additional headers.

    No authorization header is set.
    """

    def _headers(self, settings: Settings) -> Headers:
        headers: Headers = {}
        if settings.HTTP_HEADERS_CONTENT_TYPE:
            headers["Content-Type"] = [settings.HTTP_HEADERS_CONTENT_TYPE]
        for name, value in settings.additional_headers:
            headers.setdefault(name, []).append(value)
        return headers

    def build(self, settings: Settings) -> RequestTemplate:
        return RequestTemplate(
            method="POST",
            url=settings.HTTP_URL,
            headers=self._headers(settings),
            timeout=float(settings.HTTP_TIMEOUT),
        )


class StaticAuthRequestBuilder(DefaultRequestBuilder):
    """Default template plus a static Authorization header."""

    def _headers(self, settings: Settings) -> Headers:
        headers = super()._headers(settings)
        headers["Authorization"] = [settings.HTTP_HEADERS_AUTHORIZATION]
        return headers


def get_request_builder(settings: Settings) -> RequestBuilder:
    """
    Select the request builder for the configured authorization type.

    Args:
        settings: Application settings (HTTP_AUTHORIZATION_TYPE)

    Returns:
        RequestBuilder instance
    """
    if settings.HTTP_AUTHORIZATION_TYPE == "static":
        builder: RequestBuilder = StaticAuthRequestBuilder()
    else:
        builder = DefaultRequestBuilder()

    logger.debug(
        "Selected request builder",
        authorization_type=settings.HTTP_AUTHORIZATION_TYPE,
        builder_class=type(builder).__name__,
    )
    return builder
