"""Typed runtime state objects for dependency wiring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from voicelive.state.settings import AppSettings
    from voicelive.realtime.bridge import RelayBridge
    from voicelive.handlers.admission import SessionSlots


@dataclass(slots=True)
class RuntimeDeps:
    slots: SessionSlots
    relay_bridge: RelayBridge
    settings: AppSettings


__all__ = ["RuntimeDeps"]
