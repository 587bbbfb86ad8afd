"""Custom Prometheus metrics for the HTTP Sink Sender.

The host process exposes these through its own /metrics endpoint.
Alert rules should be configured for:
- http_delivery_failures_total (any terminal failure needs attention)
- http_delivery_attempts_total{outcome="transport_error"} (endpoint instability)
"""

from prometheus_client import Counter, Histogram

# === Attempt Metrics ===

delivery_attempts_total = Counter(
    "http_delivery_attempts_total",
    "Total transmission attempts by outcome",
    ["outcome"],
)
"""
Transmission attempts counter.

Labels:
- outcome: success (response accepted), transport_error (no response),
  rejected (response refused by the handler)

Alert thresholds:
- WARN: transport_error rate > 5% of attempts
"""

# === Terminal Failure Metrics ===

delivery_failures_total = Counter(
    "http_delivery_failures_total",
    "Total send calls that ended in a terminal failure, by reason",
    ["reason"],
)
"""
Terminal failures counter.

Labels:
- reason: retries_exhausted, interrupted, rejected

Alert thresholds:
- WARN: any retries_exhausted (endpoint unreachable for a full retry budget)
"""

# === Latency Metrics ===

delivery_latency_seconds = Histogram(
    "http_delivery_latency_seconds",
    "Time from first attempt to final outcome of a send call",
    ["success"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0],
)
"""
Send latency histogram, including backoff waits.

Labels:
- success: true (accepted response returned), false (terminal failure)
"""
