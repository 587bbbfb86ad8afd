"""
HTTP Sink Sender.

Resilient outbound HTTP delivery for a record pipeline:
- Fixed-backoff retry on transport failures
- Pluggable response handlers (accept/reject by status code)
- Per-attempt header templating (${unix-timestamp})

Architecture: request builder + httpx transport + retrying sender
"""

__version__ = "0.1.0"
