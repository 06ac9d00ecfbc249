"""WebSocket protocol configuration and constants."""

from __future__ import annotations

# Client-facing endpoint
WS_ENDPOINT_PATH = "/api/voicelive/ws"

# Event keys
WS_KEY_TYPE = "type"
WS_KEY_ERROR = "error"
WS_KEY_MESSAGE = "message"

# Close codes
WS_CLOSE_NORMAL_CODE = 1000
WS_CLOSE_INTERNAL_ERROR_CODE = 1011
WS_CLOSE_BUSY_CODE = 4002

WS_CLOSE_UPSTREAM_CLOSED_REASON = "Azure connection closed"
WS_CLOSE_CLIENT_DISCONNECTED_REASON = "Client disconnected"
WS_CLOSE_CLIENT_ERROR_REASON = "Client error"
WS_CLOSE_NOT_CONFIGURED_REASON = "Relay not configured"
WS_CLOSE_BUSY_REASON = "Server busy"

# Client-visible error messages
WS_ERROR_UPSTREAM_PREFIX = "Azure VLA connection error"
WS_ERROR_NOT_CONFIGURED_PREFIX = "Voice Live relay is not configured"
WS_ERROR_SERVER_AT_CAPACITY = "Server cannot accept new connections. Please try again later."

# Maximum inbound frame size on the upstream socket (bytes)
WS_UPSTREAM_MAX_MESSAGE_BYTES = 16 * 1024 * 1024

__all__ = [
    "WS_CLOSE_BUSY_CODE",
    "WS_CLOSE_BUSY_REASON",
    "WS_CLOSE_CLIENT_DISCONNECTED_REASON",
    "WS_CLOSE_CLIENT_ERROR_REASON",
    "WS_CLOSE_INTERNAL_ERROR_CODE",
    "WS_CLOSE_NORMAL_CODE",
    "WS_CLOSE_NOT_CONFIGURED_REASON",
    "WS_CLOSE_UPSTREAM_CLOSED_REASON",
    "WS_ENDPOINT_PATH",
    "WS_ERROR_NOT_CONFIGURED_PREFIX",
    "WS_ERROR_SERVER_AT_CAPACITY",
    "WS_ERROR_UPSTREAM_PREFIX",
    "WS_KEY_ERROR",
    "WS_KEY_MESSAGE",
    "WS_KEY_TYPE",
    "WS_UPSTREAM_MAX_MESSAGE_BYTES",
]
