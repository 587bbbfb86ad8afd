"""Monitoring and metrics instrumentation for the HTTP Sink Sender.

Exports custom Prometheus metrics for operational monitoring and alerting.
"""

from http_sink.monitoring.metrics import (
    delivery_attempts_total,
    delivery_failures_total,
    delivery_latency_seconds,
)

__all__ = [
    "delivery_attempts_total",
    "delivery_failures_total",
    "delivery_latency_seconds",
]
