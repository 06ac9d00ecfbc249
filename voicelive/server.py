"""FastAPI server hosting the Azure Voice Live WebSocket relay."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from contextlib import asynccontextmanager

from fastapi import FastAPI, WebSocket
from fastapi.responses import ORJSONResponse
from fastapi.middleware.cors import CORSMiddleware

from voicelive import __version__
from voicelive.config.websocket import WS_ENDPOINT_PATH
from voicelive.runtime.logging import configure_logging
from voicelive.runtime.settings import load_server_settings
from voicelive.runtime.dependencies import build_runtime_deps
from voicelive.handlers.websocket.manager import handle_voice_live_connection
from voicelive.config.server import (
    CORS_ALLOW_HEADERS,
    CORS_ALLOW_METHODS,
    DEV_CORS_ORIGIN_REGEX,
    DEVELOPMENT_ENVIRONMENT,
)

logger = logging.getLogger(__name__)

configure_logging()

_server_settings = load_server_settings()


@asynccontextmanager
async def _lifespan(app: FastAPI):
    if getattr(app.state, "runtime_deps", None) is None:
        app.state.runtime_deps = build_runtime_deps()
    logger.info(
        "runtime: ready (relay endpoint %s, environment %s)",
        WS_ENDPOINT_PATH,
        _server_settings.environment,
    )
    yield


app = FastAPI(default_response_class=ORJSONResponse, lifespan=_lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(_server_settings.cors_origins),
    allow_origin_regex=DEV_CORS_ORIGIN_REGEX if _server_settings.environment == DEVELOPMENT_ENVIRONMENT else None,
    allow_credentials=True,
    allow_methods=list(CORS_ALLOW_METHODS),
    allow_headers=list(CORS_ALLOW_HEADERS),
)


@app.get("/")
async def root() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/health")
async def health() -> dict[str, str]:
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": __version__,
        "environment": _server_settings.environment,
    }


@app.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/api")
async def api_info() -> dict[str, object]:
    return {
        "name": "Voice Live Relay",
        "version": __version__,
        "description": "WebSocket relay between browser clients and Azure Voice Live",
        "endpoints": {
            "health": "GET /health",
            "voiceLive": f"WS {WS_ENDPOINT_PATH}",
        },
    }


@app.websocket(WS_ENDPOINT_PATH)
async def voice_live_endpoint(websocket: WebSocket) -> None:
    runtime_deps = getattr(app.state, "runtime_deps", None)
    if runtime_deps is None:
        raise RuntimeError("Runtime dependencies are not initialized")
    await handle_voice_live_connection(websocket, runtime_deps)
