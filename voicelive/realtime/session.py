"""One relay session: a browser WebSocket paired with one upstream Voice Live socket.

    Browser --WS--> RelaySession --WSS--> Azure Voice Live (STT + LLM + TTS)

The session owns both handles. It opens the upstream socket as soon as it
runs, configures the upstream conversation once, then pumps frames in both
directions until either side goes away, at which point the other side is
closed too. Client frames that arrive before the upstream is configured are
dropped, not buffered.
"""

from __future__ import annotations

import asyncio
import logging
import contextlib
from typing import Any

from fastapi import WebSocketDisconnect
from websockets.exceptions import ConnectionClosed

from voicelive.state import RelayState
from voicelive.state.settings import AppSettings
from voicelive.config.websocket import (
    WS_CLOSE_NORMAL_CODE,
    WS_ERROR_UPSTREAM_PREFIX,
    WS_CLOSE_CLIENT_ERROR_REASON,
    WS_CLOSE_UPSTREAM_CLOSED_REASON,
    WS_CLOSE_CLIENT_DISCONNECTED_REASON,
)

from .parser import decode_json_frame, encode_json_frame
from .session_config import build_session_update
from .events import EventAction, classify_event, event_type_of, build_error_event
from .upstream import UpstreamConnector, build_upstream_url, build_upstream_headers

logger = logging.getLogger(__name__)

_WS_DISCONNECT = "websocket.disconnect"


def _describe_error(exc: BaseException) -> str:
    # ConnectionClosedError wraps the transport error (e.g. ECONNRESET) as its cause.
    cause = exc.__cause__
    if isinstance(exc, ConnectionClosed) and cause is not None and str(cause):
        return str(cause)
    return str(exc) or type(exc).__name__


class RelaySession:
    def __init__(
        self,
        client_ws: Any,
        *,
        settings: AppSettings,
        connector: UpstreamConnector,
    ) -> None:
        # Both builders raise ConfigurationError before anything touches the network.
        self._upstream_url = build_upstream_url(settings.speech, settings.voice_live)
        self._upstream_headers = build_upstream_headers(settings.speech)
        self._open_timeout_s = settings.voice_live.connect_timeout_s
        self._session_update = build_session_update(settings.voice_live)

        self._client = client_ws
        self._connector = connector
        self._upstream: Any | None = None
        self._upstream_ready = False
        self._client_open = True
        self._state = RelayState.AWAITING_UPSTREAM
        self._tasks: tuple[asyncio.Task, ...] = ()
        self.dropped_client_frames = 0

    @property
    def state(self) -> RelayState:
        return self._state

    @property
    def upstream_ready(self) -> bool:
        return self._upstream_ready

    @property
    def upstream_url(self) -> str:
        return self._upstream_url

    async def run(self) -> None:
        """Relay until either side closes, then close the other side."""
        logger.info("relay: connecting to Azure Voice Live %s", self._upstream_url)
        client_task = asyncio.create_task(self._pump_client())
        upstream_task = asyncio.create_task(self._run_upstream())
        self._tasks = (client_task, upstream_task)

        upstream_reason = WS_CLOSE_CLIENT_DISCONNECTED_REASON
        try:
            done, _pending = await asyncio.wait(self._tasks, return_when=asyncio.FIRST_COMPLETED)
            if client_task in done and not client_task.cancelled() and client_task.exception() is None:
                upstream_reason = client_task.result()
        finally:
            await self.close(upstream_reason=upstream_reason)

    async def close(self, *, upstream_reason: str = WS_CLOSE_CLIENT_DISCONNECTED_REASON) -> None:
        """Tear down both sides exactly once."""
        if self._state is RelayState.CLOSED:
            return
        self._state = RelayState.CLOSED
        self._upstream_ready = False

        current = asyncio.current_task()
        pending = [task for task in self._tasks if task is not current]
        for task in pending:
            if not task.done():
                task.cancel()
        for task in pending:
            with contextlib.suppress(Exception):
                await task

        upstream = self._upstream
        if upstream is not None and not self._upstream_closed(upstream):
            with contextlib.suppress(Exception):
                await upstream.close(code=WS_CLOSE_NORMAL_CODE, reason=upstream_reason)

        if self._client_open:
            self._client_open = False
            with contextlib.suppress(Exception):
                await self._client.close(code=WS_CLOSE_NORMAL_CODE, reason=WS_CLOSE_UPSTREAM_CLOSED_REASON)

        if self.dropped_client_frames:
            logger.info(
                "relay: session closed; dropped %s client frames received before upstream was ready",
                self.dropped_client_frames,
            )
        else:
            logger.info("relay: session closed")

    @staticmethod
    def _upstream_closed(upstream: Any) -> bool:
        return getattr(upstream, "close_code", None) is not None

    # Client -> upstream

    async def _pump_client(self) -> str:
        try:
            while True:
                message = await self._client.receive()
                if message.get("type") == _WS_DISCONNECT:
                    self._client_open = False
                    logger.info("relay: client disconnected code=%s", message.get("code"))
                    return WS_CLOSE_CLIENT_DISCONNECTED_REASON
                await self._relay_client_frame(message)
        except asyncio.CancelledError:
            return WS_CLOSE_CLIENT_DISCONNECTED_REASON
        except WebSocketDisconnect:
            self._client_open = False
            logger.info("relay: client disconnected")
            return WS_CLOSE_CLIENT_DISCONNECTED_REASON
        except Exception as exc:
            self._client_open = False
            logger.error("relay: client WebSocket error: %s", exc)
            return WS_CLOSE_CLIENT_ERROR_REASON

    async def _relay_client_frame(self, message: dict[str, Any]) -> None:
        upstream = self._upstream
        if not self._upstream_ready or upstream is None:
            self.dropped_client_frames += 1
            return

        data = message.get("bytes")
        text = message.get("text")
        if data is not None:
            outbound: str | bytes = data
        elif text is not None:
            try:
                outbound = encode_json_frame(decode_json_frame(text))
            except ValueError as exc:
                logger.warning("relay: dropping malformed client message: %s", exc)
                return
        else:
            return

        try:
            await upstream.send(outbound)
        except ConnectionClosed:
            logger.debug("relay: upstream closed while relaying client frame")

    # Upstream -> client

    async def _run_upstream(self) -> None:
        try:
            upstream = await self._connector(self._upstream_url, self._upstream_headers, self._open_timeout_s)
            self._upstream = upstream
            logger.info("relay: connected to Azure Voice Live")

            await upstream.send(encode_json_frame(self._session_update))
            self._upstream_ready = True
            self._state = RelayState.RELAYING
            logger.info("relay: upstream session configured")

            async for message in upstream:
                await self._relay_upstream_frame(message)

            logger.info(
                "relay: Azure connection closed code=%s reason=%s",
                getattr(upstream, "close_code", None),
                getattr(upstream, "close_reason", None) or "",
            )
        except asyncio.CancelledError:
            return
        except Exception as exc:
            detail = _describe_error(exc)
            logger.error("relay: Azure WebSocket error: %s", detail)
            await self._send_client(text=encode_json_frame(build_error_event(f"{WS_ERROR_UPSTREAM_PREFIX}: {detail}")))
        finally:
            self._upstream_ready = False

    async def _relay_upstream_frame(self, message: str | bytes) -> None:
        if not self._client_open:
            return

        if isinstance(message, (bytes, bytearray, memoryview)):
            # Synthesized speech (PCM16); relayed untouched.
            await self._send_client(data=bytes(message))
            return

        try:
            event = decode_json_frame(message)
        except ValueError as exc:
            logger.warning("relay: dropping malformed Azure message: %s", exc)
            return

        event_type = event_type_of(event)
        action = classify_event(event_type)
        if action is EventAction.FORWARD:
            await self._send_client(text=encode_json_frame(event))
        elif action is EventAction.SUPPRESS:
            logger.debug("relay: internal Azure event not relayed: %s", event_type)
        else:
            logger.info("relay: unhandled Azure event: %s", event_type)

    async def _send_client(self, *, text: str | None = None, data: bytes | None = None) -> bool:
        if not self._client_open:
            return False
        try:
            if data is not None:
                await self._client.send_bytes(data)
            else:
                await self._client.send_text(text or "")
        except WebSocketDisconnect:
            self._client_open = False
            return False
        except Exception:
            logger.debug("relay: client send failed", exc_info=True)
            self._client_open = False
            return False
        return True


__all__ = ["RelaySession"]
