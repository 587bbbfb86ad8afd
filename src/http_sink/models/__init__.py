"""
Pydantic data models for the HTTP Sink Sender.

Includes:
- HTTP models (RequestTemplate, HttpRequest, HttpResponse)
- Record models (SinkRecord, RecordHeader)
"""

from http_sink.models.http_models import (
    Headers,
    HttpRequest,
    HttpResponse,
    RequestTemplate,
)
from http_sink.models.record_models import RecordHeader, SinkRecord

__all__ = [
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "RequestTemplate",
    "RecordHeader",
    "SinkRecord",
]
