"""Relay session states."""

from __future__ import annotations

from enum import Enum


class RelayState(str, Enum):
    AWAITING_UPSTREAM = "awaiting_upstream"
    RELAYING = "relaying"
    CLOSED = "closed"


__all__ = ["RelayState"]
