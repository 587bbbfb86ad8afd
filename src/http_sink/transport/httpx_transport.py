"""
httpx transport implementation.

Sends requests with a persistent blocking httpx.Client. Supports:
- Connection pooling (shared client, safe across threads)
- Repeated header lines for multi-valued headers
- Mapping of httpx transport failures onto TransportError
"""

import time
from typing import Optional

import httpx
import structlog

from http_sink.models.http_models import Headers, HttpRequest, HttpResponse
from http_sink.transport.base_transport import BaseTransport
from http_sink.transport.exceptions import (
    TransportConnectionError,
    TransportTimeoutError,
)


logger = structlog.get_logger(__name__)


def _response_headers(headers: httpx.Headers) -> Headers:
    result: Headers = {}
    for name, value in headers.multi_items():
        result.setdefault(name, []).append(value)
    return result


class HttpxTransport(BaseTransport):
    """
    Blocking transport backed by httpx.Client.

    Only failures where no response came back are raised. A 3xx/4xx/5xx reply
    is returned as a normal HttpResponse; redirects are never followed, since
    following one would resend a POST as a bodiless GET.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        connection_limits: Optional[httpx.Limits] = None,
        client: Optional[httpx.Client] = None,
        http_transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize transport.

        Args:
            timeout: Default request timeout in seconds
            connection_limits: httpx connection pool limits (default: 10 max connections)
            client: Pre-built client
            http_transport: Low-level httpx transport for the built client
                (tests pass httpx.MockTransport)
        """
        self.timeout = timeout

        if client is None:
            if connection_limits is None:
                connection_limits = httpx.Limits(
                    max_keepalive_connections=5,
                    max_connections=10,
                    keepalive_expiry=30.0
                )
            client = httpx.Client(
                timeout=httpx.Timeout(timeout),
                limits=connection_limits,
                transport=http_transport,
                follow_redirects=False
            )
        self._client = client

        logger.info(
            "httpx transport initialized",
            timeout=timeout,
            connection_limits=str(connection_limits)
        )

    def transmit(self, request: HttpRequest) -> HttpResponse:
        """
        Send the request through httpx and wrap the reply.

        Raises:
            TransportTimeoutError: httpx timed out (connect, read, write or pool)
            TransportConnectionError: Any other httpx transport failure
        """
        header_lines = [
            (name, value)
            for name, values in request.headers.items()
            for value in values
        ]
        content = request.body.encode("utf-8") if request.body is not None else None
        timeout = request.timeout if request.timeout is not None else self.timeout

        start_time = time.monotonic()
        try:
            response = self._client.request(
                request.method,
                request.url,
                headers=header_lines,
                content=content,
                timeout=timeout,
                follow_redirects=False,
            )
        except httpx.TimeoutException as e:
            raise TransportTimeoutError(
                f"Request timeout after {timeout}s",
                details={"url": request.url, "timeout": timeout, "error_type": type(e).__name__}
            ) from e
        except httpx.TransportError as e:
            raise TransportConnectionError(
                f"Network error: {str(e)}",
                details={"url": request.url, "error_type": type(e).__name__}
            ) from e

        elapsed_ms = int((time.monotonic() - start_time) * 1000)

        return HttpResponse(
            status_code=response.status_code,
            body=response.text,
            headers=_response_headers(response.headers),
            elapsed_ms=elapsed_ms,
        )

    def close(self) -> None:
        """Close the HTTP client connection pool."""
        if not self._client.is_closed:
            self._client.close()
            logger.debug("Closed httpx transport")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(timeout={self.timeout}s)"
