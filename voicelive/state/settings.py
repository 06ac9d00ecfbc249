"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SpeechSettings:
    resource_endpoint: str
    api_key: str


@dataclass(frozen=True, slots=True)
class VadSettings:
    threshold: float
    prefix_padding_ms: int
    silence_duration_ms: int


@dataclass(frozen=True, slots=True)
class VoiceLiveSettings:
    api_version: str
    model: str
    voice_name: str
    voice_type: str
    instructions: str
    transcription_model: str
    vad: VadSettings
    connect_timeout_s: float


@dataclass(frozen=True, slots=True)
class LimitsSettings:
    max_concurrent_connections: int


@dataclass(frozen=True, slots=True)
class ServerSettings:
    host: str
    port: int
    environment: str
    cors_origins: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class AppSettings:
    speech: SpeechSettings
    voice_live: VoiceLiveSettings
    limits: LimitsSettings
    server: ServerSettings


__all__ = [
    "AppSettings",
    "LimitsSettings",
    "ServerSettings",
    "SpeechSettings",
    "VadSettings",
    "VoiceLiveSettings",
]
