"""Unit test fixtures (mocks and stubs).

Provides mock objects for testing without a network.
"""

import threading
from unittest.mock import MagicMock

import pytest

from http_sink.request_builder import DefaultRequestBuilder
from http_sink.transport.base_transport import BaseTransport


@pytest.fixture
def mock_transport():
    """Mock transport; set transmit.side_effect / return_value per test."""
    return MagicMock(spec=BaseTransport)


@pytest.fixture
def mock_cancel_event():
    """Cancel event whose wait() returns immediately without being set."""
    event = MagicMock(spec=threading.Event)
    event.wait.return_value = False
    return event


@pytest.fixture
def request_builder():
    """Real default request builder (pure, no I/O)."""
    return DefaultRequestBuilder()
