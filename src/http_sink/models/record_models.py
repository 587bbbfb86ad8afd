"""
Sink record model.

A SinkRecord is the domain record handed to the sender by the host pipeline.
Its value becomes the request body (via a RecordValueConverter) and its
headers are forwarded as HTTP headers.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class RecordHeader(BaseModel):
    """Single record header. Keys may repeat within one record."""

    key: str = Field(..., min_length=1)
    value: Any = None


class SinkRecord(BaseModel):
    """Record consumed from a topic and destined for the HTTP endpoint."""

    topic: str = Field(..., description="Source topic")
    partition: int = Field(default=0, ge=0)
    offset: int = Field(default=0, ge=0)
    key: Optional[Any] = Field(default=None, description="Record key")
    value: Any = Field(default=None, description="Record value (converted into the request body)")
    headers: list[RecordHeader] = Field(default_factory=list)

    def header_items(self) -> list[tuple[str, str]]:
        """Headers as (name, text) pairs, in record order."""
        return [
            (header.key, "" if header.value is None else str(header.value))
            for header in self.headers
        ]
