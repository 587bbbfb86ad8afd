"""
Unit tests for the HTTP Sink Sender.

Test individual components in isolation:
- Models (templates, responses, records)
- Header templating
- Response handlers
- HttpSender retry loop
- httpx transport (via httpx.MockTransport)
- Settings, request builders and converters
"""
