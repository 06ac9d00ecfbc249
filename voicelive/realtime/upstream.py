"""Upstream Voice Live endpoint construction and connection."""

from __future__ import annotations

from typing import Any
from urllib.parse import urlencode
from collections.abc import Callable, Awaitable

from websockets.asyncio.client import connect

from voicelive.errors import ConfigurationError
from voicelive.config.websocket import WS_UPSTREAM_MAX_MESSAGE_BYTES
from voicelive.config.voicelive import VOICE_LIVE_PATH, UPSTREAM_AUTH_HEADER
from voicelive.state.settings import SpeechSettings, VoiceLiveSettings
from voicelive.config.secrets import ENV_SPEECH_KEY, SPEECH_KEY_PLACEHOLDERS, ENV_SPEECH_RESOURCE_ENDPOINT

# (url, headers, open_timeout_s) -> connected duplex upstream socket
UpstreamConnector = Callable[[str, dict[str, str], float], Awaitable[Any]]


def has_credentials(speech: SpeechSettings) -> bool:
    key = speech.api_key.strip()
    return bool(speech.resource_endpoint.strip()) and bool(key) and key not in SPEECH_KEY_PLACEHOLDERS


def build_upstream_url(speech: SpeechSettings, voice_live: VoiceLiveSettings) -> str:
    endpoint = speech.resource_endpoint.strip().rstrip("/")
    if not endpoint:
        raise ConfigurationError(ENV_SPEECH_RESOURCE_ENDPOINT, "is not set")

    if endpoint.startswith("https://"):
        base = "wss://" + endpoint[len("https://") :]
    elif endpoint.startswith("wss://"):
        base = endpoint
    else:
        raise ConfigurationError(ENV_SPEECH_RESOURCE_ENDPOINT, "must be an https:// URL")

    query = urlencode({"api-version": voice_live.api_version, "model": voice_live.model})
    return f"{base}{VOICE_LIVE_PATH}?{query}"


def build_upstream_headers(speech: SpeechSettings) -> dict[str, str]:
    # The key travels in a header only, never in the URL (URLs end up in logs).
    key = speech.api_key.strip()
    if not key or key in SPEECH_KEY_PLACEHOLDERS:
        raise ConfigurationError(ENV_SPEECH_KEY, "is not set")
    return {UPSTREAM_AUTH_HEADER: key}


async def connect_upstream(url: str, headers: dict[str, str], open_timeout_s: float) -> Any:
    return await connect(
        url,
        additional_headers=headers,
        open_timeout=open_timeout_s,
        max_size=WS_UPSTREAM_MAX_MESSAGE_BYTES,
    )


__all__ = [
    "UpstreamConnector",
    "build_upstream_headers",
    "build_upstream_url",
    "connect_upstream",
    "has_credentials",
]
