"""Per-connection entry point for the Voice Live relay endpoint."""

from __future__ import annotations

import logging
import contextlib

from fastapi import WebSocket

from voicelive.state import RuntimeDeps
from voicelive.errors import ConfigurationError
from voicelive.realtime.session import RelaySession
from voicelive.config.websocket import (
    WS_CLOSE_BUSY_CODE,
    WS_CLOSE_BUSY_REASON,
    WS_ERROR_SERVER_AT_CAPACITY,
    WS_CLOSE_INTERNAL_ERROR_CODE,
    WS_CLOSE_NOT_CONFIGURED_REASON,
    WS_ERROR_NOT_CONFIGURED_PREFIX,
)

from .errors import close_with_error, reject_connection

logger = logging.getLogger(__name__)


async def _prepare_connection(ws: WebSocket, runtime_deps: RuntimeDeps) -> bool:
    if not await runtime_deps.slots.acquire(ws):
        await reject_connection(
            ws,
            message=WS_ERROR_SERVER_AT_CAPACITY,
            close_code=WS_CLOSE_BUSY_CODE,
            close_reason=WS_CLOSE_BUSY_REASON,
        )
        return False

    try:
        await ws.accept()
    except Exception:
        with contextlib.suppress(Exception):
            await runtime_deps.slots.release(ws)
        raise
    return True


async def _open_session(ws: WebSocket, runtime_deps: RuntimeDeps) -> RelaySession | None:
    try:
        return runtime_deps.relay_bridge.new_session(ws)
    except ConfigurationError as exc:
        logger.error("relay: cannot open upstream session: %s", exc)
        await close_with_error(
            ws,
            message=f"{WS_ERROR_NOT_CONFIGURED_PREFIX}: {exc}",
            close_code=WS_CLOSE_INTERNAL_ERROR_CODE,
            close_reason=WS_CLOSE_NOT_CONFIGURED_REASON,
        )
        return None


async def handle_voice_live_connection(ws: WebSocket, runtime_deps: RuntimeDeps) -> None:
    if not await _prepare_connection(ws, runtime_deps):
        return

    try:
        logger.info("relay: new client connection. Active: %s", runtime_deps.slots.in_use)
        session = await _open_session(ws, runtime_deps)
        if session is not None:
            await session.run()
    finally:
        with contextlib.suppress(Exception):
            await runtime_deps.slots.release(ws)
        logger.info("relay: client connection finished. Active: %s", runtime_deps.slots.in_use)


__all__ = ["handle_voice_live_connection"]
