"""Secrets configuration for the upstream speech resource."""

from __future__ import annotations

ENV_SPEECH_KEY = "SPEECH_KEY"
ENV_SPEECH_RESOURCE_ENDPOINT = "SPEECH_RESOURCE_ENDPOINT"

# Placeholder values shipped in sample .env files. A key set to one of these
# is treated as missing.
SPEECH_KEY_PLACEHOLDERS = frozenset({"USE_AZURE_AD", "YOUR_SPEECH_KEY_HERE"})

__all__ = ["ENV_SPEECH_KEY", "ENV_SPEECH_RESOURCE_ENDPOINT", "SPEECH_KEY_PLACEHOLDERS"]
