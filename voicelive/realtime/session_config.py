"""Builder for the one-time upstream `session.update` message."""

from __future__ import annotations

from typing import Any

from voicelive.state.settings import VoiceLiveSettings
from voicelive.config.voicelive import AUDIO_FORMAT_PCM16, SESSION_MODALITIES, TURN_DETECTION_TYPE


def build_session_update(settings: VoiceLiveSettings) -> dict[str, Any]:
    return {
        "type": "session.update",
        "session": {
            "modalities": list(SESSION_MODALITIES),
            "voice": {
                "name": settings.voice_name,
                "type": settings.voice_type,
            },
            "instructions": settings.instructions,
            "input_audio_format": AUDIO_FORMAT_PCM16,
            "output_audio_format": AUDIO_FORMAT_PCM16,
            "input_audio_transcription": {
                "model": settings.transcription_model,
            },
            "turn_detection": {
                "type": TURN_DETECTION_TYPE,
                "threshold": settings.vad.threshold,
                "prefix_padding_ms": settings.vad.prefix_padding_ms,
                "silence_duration_ms": settings.vad.silence_duration_ms,
            },
        },
    }


__all__ = ["build_session_update"]
