"""Upstream Voice Live session configuration (env names and defaults only)."""

from __future__ import annotations

# Upstream endpoint
VOICE_LIVE_PATH = "/voice-live/realtime"
UPSTREAM_AUTH_HEADER = "api-key"

ENV_VOICE_LIVE_API_VERSION = "VOICE_LIVE_API_VERSION"
ENV_VOICE_LIVE_MODEL = "VOICE_LIVE_MODEL"
ENV_VOICE_LIVE_CONNECT_TIMEOUT_S = "VOICE_LIVE_CONNECT_TIMEOUT_S"

DEFAULT_VOICE_LIVE_API_VERSION = "2025-10-01"
DEFAULT_VOICE_LIVE_MODEL = "gpt-4o"
DEFAULT_VOICE_LIVE_CONNECT_TIMEOUT_S = 10.0

# Session (sent once as session.update)
ENV_VOICE_LIVE_VOICE = "VOICE_LIVE_VOICE"
ENV_VOICE_LIVE_VOICE_TYPE = "VOICE_LIVE_VOICE_TYPE"
ENV_VOICE_LIVE_INSTRUCTIONS = "VOICE_LIVE_INSTRUCTIONS"
ENV_VOICE_LIVE_TRANSCRIPTION_MODEL = "VOICE_LIVE_TRANSCRIPTION_MODEL"

DEFAULT_VOICE_LIVE_VOICE = "en-US-AvaNeural"
DEFAULT_VOICE_LIVE_VOICE_TYPE = "azure-standard"
DEFAULT_VOICE_LIVE_INSTRUCTIONS = (
    "You are a helpful citizen advice assistant. Help users with questions about benefits, "
    "housing, employment, and general advice. Be concise and friendly."
)
DEFAULT_VOICE_LIVE_TRANSCRIPTION_MODEL = "azure-speech"

SESSION_MODALITIES: tuple[str, ...] = ("text", "audio")
AUDIO_FORMAT_PCM16 = "pcm16"
TURN_DETECTION_TYPE = "server_vad"

# Server VAD tuning
ENV_VOICE_LIVE_VAD_THRESHOLD = "VOICE_LIVE_VAD_THRESHOLD"
ENV_VOICE_LIVE_VAD_PREFIX_PADDING_MS = "VOICE_LIVE_VAD_PREFIX_PADDING_MS"
ENV_VOICE_LIVE_VAD_SILENCE_DURATION_MS = "VOICE_LIVE_VAD_SILENCE_DURATION_MS"

DEFAULT_VOICE_LIVE_VAD_THRESHOLD = 0.5
DEFAULT_VOICE_LIVE_VAD_PREFIX_PADDING_MS = 300
DEFAULT_VOICE_LIVE_VAD_SILENCE_DURATION_MS = 500

__all__ = [
    "AUDIO_FORMAT_PCM16",
    "DEFAULT_VOICE_LIVE_API_VERSION",
    "DEFAULT_VOICE_LIVE_CONNECT_TIMEOUT_S",
    "DEFAULT_VOICE_LIVE_INSTRUCTIONS",
    "DEFAULT_VOICE_LIVE_MODEL",
    "DEFAULT_VOICE_LIVE_TRANSCRIPTION_MODEL",
    "DEFAULT_VOICE_LIVE_VAD_PREFIX_PADDING_MS",
    "DEFAULT_VOICE_LIVE_VAD_SILENCE_DURATION_MS",
    "DEFAULT_VOICE_LIVE_VAD_THRESHOLD",
    "DEFAULT_VOICE_LIVE_VOICE",
    "DEFAULT_VOICE_LIVE_VOICE_TYPE",
    "ENV_VOICE_LIVE_API_VERSION",
    "ENV_VOICE_LIVE_CONNECT_TIMEOUT_S",
    "ENV_VOICE_LIVE_INSTRUCTIONS",
    "ENV_VOICE_LIVE_MODEL",
    "ENV_VOICE_LIVE_TRANSCRIPTION_MODEL",
    "ENV_VOICE_LIVE_VAD_PREFIX_PADDING_MS",
    "ENV_VOICE_LIVE_VAD_SILENCE_DURATION_MS",
    "ENV_VOICE_LIVE_VAD_THRESHOLD",
    "ENV_VOICE_LIVE_VOICE",
    "ENV_VOICE_LIVE_VOICE_TYPE",
    "SESSION_MODALITIES",
    "TURN_DETECTION_TYPE",
    "UPSTREAM_AUTH_HEADER",
    "VOICE_LIVE_PATH",
]
