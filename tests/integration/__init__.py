"""
Integration tests for the HTTP Sink Sender.

Run the full sender against a real HTTP server bound to localhost.
"""
