"""Runtime dependency construction (relay bridge + admission control)."""

from __future__ import annotations

import logging

from voicelive.state import RuntimeDeps
from voicelive.state.settings import AppSettings
from voicelive.realtime.bridge import RelayBridge
from voicelive.handlers.admission import SessionSlots
from voicelive.realtime.upstream import UpstreamConnector, has_credentials, connect_upstream

from .settings import load_settings

logger = logging.getLogger(__name__)


def build_runtime_deps(
    settings: AppSettings | None = None,
    *,
    connector: UpstreamConnector | None = None,
) -> RuntimeDeps:
    settings = settings or load_settings()

    if not has_credentials(settings.speech):
        # Not fatal: each relay session reports the gap to its client.
        logger.warning("runtime: speech endpoint or key is not configured; relay sessions will be rejected")

    relay_bridge = RelayBridge(settings=settings, connector=connector or connect_upstream)
    slots = SessionSlots(capacity=settings.limits.max_concurrent_connections)

    return RuntimeDeps(
        slots=slots,
        relay_bridge=relay_bridge,
        settings=settings,
    )


__all__ = ["RuntimeDeps", "build_runtime_deps"]
