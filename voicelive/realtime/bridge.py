"""Factory for pairing browser connections with upstream relay sessions."""

from __future__ import annotations

from typing import Any

from voicelive.state.settings import AppSettings

from .session import RelaySession
from .upstream import UpstreamConnector


class RelayBridge:
    def __init__(self, *, settings: AppSettings, connector: UpstreamConnector) -> None:
        self._settings = settings
        self._connector = connector

    def new_session(self, client_ws: Any) -> RelaySession:
        """Build a session for an accepted client socket.

        Raises ConfigurationError when the upstream endpoint or key is missing.
        """
        return RelaySession(client_ws, settings=self._settings, connector=self._connector)


__all__ = ["RelayBridge"]
