"""
Record value converters.

Turn a SinkRecord's value into the text body of an HTTP request.
"""

import json
from typing import Any

from pydantic import BaseModel

from http_sink.models.record_models import SinkRecord


class RecordValueConverter:
    """
    Convert record values to request bodies.

    Supported value types:
    - str: sent as-is
    - bytes: decoded as UTF-8
    - dict / list / numbers / bool / None: JSON-encoded
    - pydantic models: model_dump_json()
    """

    def convert(self, record: SinkRecord) -> str:
        """
        Convert the record value to a string body.

        Raises:
            TypeError: Value type is not supported
        """
        return self._convert_value(record.value)

    def _convert_value(self, value: Any) -> str:
        if isinstance(value, str):
            return value
        if isinstance(value, (bytes, bytearray)):
            return bytes(value).decode("utf-8")
        if isinstance(value, BaseModel):
            return value.model_dump_json()
        if value is None or isinstance(value, (dict, list, int, float, bool)):
            return json.dumps(value)
        raise TypeError(f"Unsupported record value type: {type(value).__name__}")
