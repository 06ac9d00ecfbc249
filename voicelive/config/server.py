"""HTTP server configuration (env names and defaults only)."""

from __future__ import annotations

ENV_HOST = "HOST"
ENV_PORT = "PORT"
ENV_ENVIRONMENT = "ENVIRONMENT"
ENV_CORS_ORIGINS = "CORS_ORIGINS"

DEFAULT_HOST = "0.0.0.0"  # nosec B104
DEFAULT_PORT = 3001
DEFAULT_ENVIRONMENT = "development"
DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://localhost:3000"

# In development any localhost origin is allowed on top of CORS_ORIGINS.
DEVELOPMENT_ENVIRONMENT = "development"
DEV_CORS_ORIGIN_REGEX = r"http://localhost(:\d+)?"

CORS_ALLOW_METHODS: tuple[str, ...] = ("GET", "POST", "OPTIONS")
CORS_ALLOW_HEADERS: tuple[str, ...] = ("Content-Type", "Authorization")

__all__ = [
    "CORS_ALLOW_HEADERS",
    "CORS_ALLOW_METHODS",
    "DEFAULT_CORS_ORIGINS",
    "DEFAULT_ENVIRONMENT",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "DEVELOPMENT_ENVIRONMENT",
    "DEV_CORS_ORIGIN_REGEX",
    "ENV_CORS_ORIGINS",
    "ENV_ENVIRONMENT",
    "ENV_HOST",
    "ENV_PORT",
]
