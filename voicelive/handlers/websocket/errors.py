"""Error helpers for the client-facing relay socket."""

from __future__ import annotations

import logging

from fastapi import WebSocket, WebSocketDisconnect

from voicelive.realtime.events import build_error_event
from voicelive.realtime.parser import encode_json_frame

logger = logging.getLogger(__name__)


async def safe_send_text(ws: WebSocket, text: str) -> bool:
    try:
        await ws.send_text(text)
    except WebSocketDisconnect:
        return False
    except Exception:
        logger.debug("WebSocket send failed", exc_info=True)
        return False
    return True


async def send_error_event(ws: WebSocket, message: str) -> bool:
    return await safe_send_text(ws, encode_json_frame(build_error_event(message)))


async def close_with_error(
    ws: WebSocket,
    *,
    message: str,
    close_code: int,
    close_reason: str,
) -> None:
    """Send an `error` event to an accepted socket, then close it."""
    await send_error_event(ws, message)
    try:
        await ws.close(code=close_code, reason=close_reason)
    except Exception:
        return


async def reject_connection(
    ws: WebSocket,
    *,
    message: str,
    close_code: int,
    close_reason: str,
) -> None:
    # Accept so we can send a structured error, then close.
    try:
        await ws.accept()
    except Exception:
        # If accept fails, nothing else to do.
        return
    await close_with_error(ws, message=message, close_code=close_code, close_reason=close_reason)


__all__ = [
    "close_with_error",
    "reject_connection",
    "safe_send_text",
    "send_error_event",
]
