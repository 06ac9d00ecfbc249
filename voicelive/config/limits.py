"""Admission control configuration (env names and defaults only)."""

from __future__ import annotations

ENV_MAX_CONCURRENT_CONNECTIONS = "MAX_CONCURRENT_CONNECTIONS"

# Each relay session holds two sockets (client + upstream).
DEFAULT_MAX_CONCURRENT_CONNECTIONS: int = 100

__all__ = [
    "DEFAULT_MAX_CONCURRENT_CONNECTIONS",
    "ENV_MAX_CONCURRENT_CONNECTIONS",
]
