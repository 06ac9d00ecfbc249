"""Load runtime settings.

Environment variable names and defaults live in `voicelive/config/*`; this
module resolves them into the structured dataclasses the rest of the server
uses. Invalid numeric values fall back to their defaults rather than failing
startup: a missing speech endpoint or key is only reported when a client
actually opens a relay session.
"""

from __future__ import annotations

import os

from voicelive.config.secrets import ENV_SPEECH_KEY, ENV_SPEECH_RESOURCE_ENDPOINT
from voicelive.config.limits import ENV_MAX_CONCURRENT_CONNECTIONS, DEFAULT_MAX_CONCURRENT_CONNECTIONS
from voicelive.config.server import (
    ENV_HOST,
    ENV_PORT,
    DEFAULT_HOST,
    DEFAULT_PORT,
    ENV_ENVIRONMENT,
    ENV_CORS_ORIGINS,
    DEFAULT_ENVIRONMENT,
    DEFAULT_CORS_ORIGINS,
)
from voicelive.state.settings import (
    AppSettings,
    VadSettings,
    LimitsSettings,
    ServerSettings,
    SpeechSettings,
    VoiceLiveSettings,
)
from voicelive.config.voicelive import (
    ENV_VOICE_LIVE_MODEL,
    ENV_VOICE_LIVE_VOICE,
    DEFAULT_VOICE_LIVE_MODEL,
    DEFAULT_VOICE_LIVE_VOICE,
    ENV_VOICE_LIVE_VOICE_TYPE,
    ENV_VOICE_LIVE_API_VERSION,
    ENV_VOICE_LIVE_INSTRUCTIONS,
    DEFAULT_VOICE_LIVE_VOICE_TYPE,
    ENV_VOICE_LIVE_VAD_THRESHOLD,
    DEFAULT_VOICE_LIVE_API_VERSION,
    DEFAULT_VOICE_LIVE_INSTRUCTIONS,
    DEFAULT_VOICE_LIVE_VAD_THRESHOLD,
    ENV_VOICE_LIVE_CONNECT_TIMEOUT_S,
    ENV_VOICE_LIVE_TRANSCRIPTION_MODEL,
    DEFAULT_VOICE_LIVE_CONNECT_TIMEOUT_S,
    ENV_VOICE_LIVE_VAD_PREFIX_PADDING_MS,
    DEFAULT_VOICE_LIVE_TRANSCRIPTION_MODEL,
    ENV_VOICE_LIVE_VAD_SILENCE_DURATION_MS,
    DEFAULT_VOICE_LIVE_VAD_PREFIX_PADDING_MS,
    DEFAULT_VOICE_LIVE_VAD_SILENCE_DURATION_MS,
)


def _str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _load_speech_settings() -> SpeechSettings:
    return SpeechSettings(
        resource_endpoint=_str_env(ENV_SPEECH_RESOURCE_ENDPOINT, ""),
        api_key=_str_env(ENV_SPEECH_KEY, ""),
    )


def _load_vad_settings() -> VadSettings:
    threshold = _float_env(ENV_VOICE_LIVE_VAD_THRESHOLD, DEFAULT_VOICE_LIVE_VAD_THRESHOLD)
    if threshold < 0.0 or threshold > 1.0:
        threshold = DEFAULT_VOICE_LIVE_VAD_THRESHOLD
    return VadSettings(
        threshold=threshold,
        prefix_padding_ms=max(
            0, _int_env(ENV_VOICE_LIVE_VAD_PREFIX_PADDING_MS, DEFAULT_VOICE_LIVE_VAD_PREFIX_PADDING_MS)
        ),
        silence_duration_ms=max(
            0, _int_env(ENV_VOICE_LIVE_VAD_SILENCE_DURATION_MS, DEFAULT_VOICE_LIVE_VAD_SILENCE_DURATION_MS)
        ),
    )


def _load_voice_live_settings() -> VoiceLiveSettings:
    connect_timeout = _float_env(ENV_VOICE_LIVE_CONNECT_TIMEOUT_S, DEFAULT_VOICE_LIVE_CONNECT_TIMEOUT_S)
    if connect_timeout <= 0:
        connect_timeout = DEFAULT_VOICE_LIVE_CONNECT_TIMEOUT_S

    return VoiceLiveSettings(
        api_version=_str_env(ENV_VOICE_LIVE_API_VERSION, DEFAULT_VOICE_LIVE_API_VERSION),
        model=_str_env(ENV_VOICE_LIVE_MODEL, DEFAULT_VOICE_LIVE_MODEL),
        voice_name=_str_env(ENV_VOICE_LIVE_VOICE, DEFAULT_VOICE_LIVE_VOICE),
        voice_type=_str_env(ENV_VOICE_LIVE_VOICE_TYPE, DEFAULT_VOICE_LIVE_VOICE_TYPE),
        instructions=_str_env(ENV_VOICE_LIVE_INSTRUCTIONS, DEFAULT_VOICE_LIVE_INSTRUCTIONS),
        transcription_model=_str_env(ENV_VOICE_LIVE_TRANSCRIPTION_MODEL, DEFAULT_VOICE_LIVE_TRANSCRIPTION_MODEL),
        vad=_load_vad_settings(),
        connect_timeout_s=connect_timeout,
    )


def _load_limits_settings() -> LimitsSettings:
    max_connections = _int_env(ENV_MAX_CONCURRENT_CONNECTIONS, DEFAULT_MAX_CONCURRENT_CONNECTIONS)
    return LimitsSettings(max_concurrent_connections=max(1, max_connections))


def load_server_settings() -> ServerSettings:
    port = _int_env(ENV_PORT, DEFAULT_PORT)
    if port <= 0 or port > 65535:
        port = DEFAULT_PORT
    origins = tuple(o.strip() for o in _str_env(ENV_CORS_ORIGINS, DEFAULT_CORS_ORIGINS).split(",") if o.strip())
    return ServerSettings(
        host=_str_env(ENV_HOST, DEFAULT_HOST),
        port=port,
        environment=_str_env(ENV_ENVIRONMENT, DEFAULT_ENVIRONMENT).lower(),
        cors_origins=origins,
    )


def load_settings() -> AppSettings:
    return AppSettings(
        speech=_load_speech_settings(),
        voice_live=_load_voice_live_settings(),
        limits=_load_limits_settings(),
        server=load_server_settings(),
    )


__all__ = ["load_server_settings", "load_settings"]
