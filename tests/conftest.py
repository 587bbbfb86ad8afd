"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

import logging

import pytest
import structlog

from http_sink.config import Settings
from http_sink.models.http_models import HttpResponse, RequestTemplate
from http_sink.models.record_models import RecordHeader, SinkRecord


@pytest.fixture(autouse=True)
def restore_logging():
    """Restore root handlers and structlog defaults after each test.

    configure_logging() replaces the root handlers, and create_http_sender()
    calls it.
    """
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    structlog.reset_defaults()


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with short backoff for local testing.

    Override specific settings in individual tests as needed:
        def test_something(test_settings):
            settings = test_settings.model_copy(update={"MAX_RETRIES": 5})
    """
    return Settings(
        # === Logging ===
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",

        # === Endpoint ===
        HTTP_URL="http://localhost:8080/ingest",
        HTTP_TIMEOUT=5,
        HTTP_AUTHORIZATION_TYPE="none",
        HTTP_HEADERS_CONTENT_TYPE="application/json",
        HTTP_HEADERS_ADDITIONAL=[],

        # === Retry ===
        MAX_RETRIES=2,
        RETRY_BACKOFF_MS=10,
    )


@pytest.fixture
def sample_template() -> RequestTemplate:
    """Request template with one static and one templated header."""
    return RequestTemplate(
        method="POST",
        url="http://localhost:8080/ingest",
        headers={
            "Content-Type": ["application/json"],
            "X-Request-Time": ["${unix-timestamp}"],
        },
        body='{"id": 1}',
    )


@pytest.fixture
def create_test_response():
    """Factory fixture to create HttpResponse with a custom status.

    Usage:
        def test_something(create_test_response):
            response = create_test_response(status_code=503, body="down")
    """
    def _create(status_code: int = 200, body: str = "ok") -> HttpResponse:
        return HttpResponse(status_code=status_code, body=body, headers={}, elapsed_ms=3)

    return _create


@pytest.fixture
def sample_record() -> SinkRecord:
    """SinkRecord with a JSON value and two headers."""
    return SinkRecord(
        topic="orders",
        partition=0,
        offset=42,
        key="order-42",
        value={"order_id": 42, "amount": 9.5},
        headers=[
            RecordHeader(key="X-Trace-Id", value="abc123"),
            RecordHeader(key="X-Attempt-Time", value="${unix-timestamp}"),
        ],
    )
