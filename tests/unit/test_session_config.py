from __future__ import annotations

from voicelive.state.settings import VadSettings, VoiceLiveSettings
from voicelive.realtime.session_config import build_session_update


def _voice_live(**overrides) -> VoiceLiveSettings:
    values = dict(
        api_version="2025-10-01",
        model="gpt-4o",
        voice_name="en-US-AvaNeural",
        voice_type="azure-standard",
        instructions="Be brief.",
        transcription_model="azure-speech",
        vad=VadSettings(threshold=0.5, prefix_padding_ms=300, silence_duration_ms=500),
        connect_timeout_s=10.0,
    )
    values.update(overrides)
    return VoiceLiveSettings(**values)


def test_session_update_payload() -> None:
    assert build_session_update(_voice_live()) == {
        "type": "session.update",
        "session": {
            "modalities": ["text", "audio"],
            "voice": {"name": "en-US-AvaNeural", "type": "azure-standard"},
            "instructions": "Be brief.",
            "input_audio_format": "pcm16",
            "output_audio_format": "pcm16",
            "input_audio_transcription": {"model": "azure-speech"},
            "turn_detection": {
                "type": "server_vad",
                "threshold": 0.5,
                "prefix_padding_ms": 300,
                "silence_duration_ms": 500,
            },
        },
    }


def test_session_update_follows_settings() -> None:
    settings = _voice_live(
        voice_name="en-GB-SoniaNeural",
        vad=VadSettings(threshold=0.8, prefix_padding_ms=100, silence_duration_ms=900),
    )
    session = build_session_update(settings)["session"]
    assert session["voice"]["name"] == "en-GB-SoniaNeural"
    assert session["turn_detection"]["threshold"] == 0.8
    assert session["turn_detection"]["silence_duration_ms"] == 900
