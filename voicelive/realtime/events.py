"""Upstream event taxonomy: which realtime events reach the browser.

The upstream API emits many bookkeeping events that mean nothing to the
browser UI. Known event types map to an explicit action; everything else is
treated as protocol drift and only logged.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from voicelive.config.websocket import WS_KEY_TYPE, WS_KEY_ERROR, WS_KEY_MESSAGE


class EventAction(str, Enum):
    FORWARD = "forward"
    SUPPRESS = "suppress"
    LOG_UNKNOWN = "log_unknown"


FORWARDED_EVENT_TYPES: frozenset[str] = frozenset(
    {
        "session.created",
        "session.updated",
        "input_audio_buffer.speech_started",
        "input_audio_buffer.speech_stopped",
        "conversation.item.input_audio_transcription.completed",
        "response.audio_transcript.delta",
        "response.audio_transcript.done",
        "response.audio.delta",
        "response.audio.done",
        "response.done",
        "error",
    }
)

SUPPRESSED_EVENT_TYPES: frozenset[str] = frozenset(
    {
        "rate_limits.updated",
        "response.created",
        "response.output_item.added",
        "response.content_part.added",
        "response.content_part.done",
        "response.output_item.done",
        "conversation.item.created",
    }
)

EVENT_POLICY: dict[str, EventAction] = {
    **{event_type: EventAction.FORWARD for event_type in FORWARDED_EVENT_TYPES},
    **{event_type: EventAction.SUPPRESS for event_type in SUPPRESSED_EVENT_TYPES},
}


def event_type_of(event: Any) -> str | None:
    if not isinstance(event, dict):
        return None
    msg_type = event.get(WS_KEY_TYPE)
    return msg_type if isinstance(msg_type, str) else None


def classify_event(event_type: str | None) -> EventAction:
    if event_type is None:
        return EventAction.LOG_UNKNOWN
    return EVENT_POLICY.get(event_type, EventAction.LOG_UNKNOWN)


def build_error_event(message: str) -> dict[str, Any]:
    return {WS_KEY_TYPE: "error", WS_KEY_ERROR: {WS_KEY_MESSAGE: message}}


__all__ = [
    "EVENT_POLICY",
    "FORWARDED_EVENT_TYPES",
    "SUPPRESSED_EVENT_TYPES",
    "EventAction",
    "build_error_event",
    "classify_event",
    "event_type_of",
]
