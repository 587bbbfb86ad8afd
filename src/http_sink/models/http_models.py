"""
HTTP request/response models for the delivery cycle.

A RequestTemplate is what callers hand to the sender; an HttpRequest is the
concrete value derived from it for one attempt; an HttpResponse is what the
transport returns for any completed round trip, whatever the status code.
"""

from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field


Headers = dict[str, list[str]]


def copy_headers(headers: Headers) -> Headers:
    """Return a copy of a header multimap with fresh value lists."""
    return {name: list(values) for name, values in headers.items()}


class RequestTemplate(BaseModel):
    """
    Immutable description of a request to deliver.

    Header values may contain placeholders that are resolved separately for
    every attempt, so the template itself is never sent as-is.
    """
    model_config = ConfigDict(frozen=True)

    method: str = Field(default="POST", description="HTTP method")
    url: str = Field(..., description="Target URI")
    headers: Headers = Field(
        default_factory=dict,
        description="Header name -> ordered list of values (may contain placeholders)"
    )
    body: Optional[str] = Field(default=None, description="Request body")
    timeout: Optional[float] = Field(default=None, gt=0, description="Per-request timeout in seconds")

    def with_body(self, body: str) -> "RequestTemplate":
        """Return a copy of this template carrying ``body``."""
        return self.model_copy(update={"body": body, "headers": copy_headers(self.headers)})

    def with_headers(self, extra: Iterable[tuple[str, str]]) -> "RequestTemplate":
        """Return a copy with each (name, value) appended to that header's values."""
        headers = copy_headers(self.headers)
        for name, value in extra:
            headers.setdefault(name, []).append(value)
        return self.model_copy(update={"headers": headers})


class HttpRequest(BaseModel):
    """Concrete request for a single transmission attempt."""
    model_config = ConfigDict(frozen=True)

    method: str
    url: str
    headers: Headers = Field(default_factory=dict)
    body: Optional[str] = None
    timeout: Optional[float] = None


class HttpResponse(BaseModel):
    """
    Response from a completed round trip.

    Error statuses are still responses; deciding whether they count as a
    delivery failure is the job of a response handler.
    """
    model_config = ConfigDict(frozen=True)

    status_code: int = Field(..., ge=100, le=999, description="HTTP status code (any three digits)")
    body: str = Field(default="", description="Response body as text")
    headers: Headers = Field(default_factory=dict)
    elapsed_ms: int = Field(default=0, ge=0, description="Round trip latency in milliseconds")

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500

    @property
    def is_server_error(self) -> bool:
        return 500 <= self.status_code < 600

    @property
    def is_error(self) -> bool:
        # Non-standard codes above 599 count as errors too
        return self.status_code >= 400
