"""
Per-attempt header templating.

Header values may carry the ${unix-timestamp} placeholder (for example a
signed-request time header). It has to reflect the moment a request is
actually transmitted, so it is resolved again for every attempt.
"""

import time
from typing import Optional

from http_sink.models.http_models import Headers, HttpRequest, RequestTemplate

UNIX_TIMESTAMP_PLACEHOLDER = "${unix-timestamp}"


def current_time_millis() -> int:
    """Wall-clock time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def refresh_headers(headers: Headers, timestamp_ms: Optional[int] = None) -> Headers:
    """
    Replace every placeholder in every header value with a timestamp.

    Args:
        headers: Header multimap (not modified)
        timestamp_ms: Timestamp to substitute; defaults to the current time

    Returns:
        New header multimap with placeholders resolved
    """
    if timestamp_ms is None:
        timestamp_ms = current_time_millis()
    stamp = str(timestamp_ms)

    return {
        name: [value.replace(UNIX_TIMESTAMP_PLACEHOLDER, stamp) for value in values]
        for name, values in headers.items()
    }


def build_request(template: RequestTemplate, timestamp_ms: Optional[int] = None) -> HttpRequest:
    """Derive the concrete request for one attempt from a template."""
    return HttpRequest(
        method=template.method,
        url=template.url,
        headers=refresh_headers(template.headers, timestamp_ms),
        body=template.body,
        timeout=template.timeout,
    )
