"""
Delivery metadata tracking.

This module defines the DeliveryMetadata dataclass that captures what a
failed delivery went through, for logs and for the caller's error handling.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class DeliveryMetadata:
    """
    Attempt history of a single send call.

    Attributes:
        total_attempts: Number of transmissions made
        max_retries: Retry budget the call started with
        backoff_ms: Fixed backoff between attempts (ms)
        total_latency_ms: Time from first attempt to final outcome (ms)
        transport_errors: Error type name for each failed transmission
    """

    total_attempts: int
    max_retries: int
    backoff_ms: int
    total_latency_ms: int
    transport_errors: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate metadata invariants."""
        if self.total_attempts < 1:
            raise ValueError("total_attempts must be >= 1")

        if self.total_attempts > self.max_retries + 1:
            raise ValueError(
                f"total_attempts ({self.total_attempts}) exceeds max_retries + 1 "
                f"({self.max_retries + 1})"
            )

        if self.total_latency_ms < 0:
            raise ValueError("total_latency_ms must be >= 0")
