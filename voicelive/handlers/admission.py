"""Relay session admission control."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

logger = logging.getLogger(__name__)


class SessionSlots:
    """Fixed pool of relay session slots, keyed by client socket.

    Every admitted browser socket is paired with one upstream socket, so the
    pool size also bounds outbound connections to the speech resource.
    """

    def __init__(self, *, capacity: int) -> None:
        self._capacity = max(1, int(capacity))
        self._lock = asyncio.Lock()
        self._holders: set[int] = set()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def in_use(self) -> int:
        return len(self._holders)

    async def acquire(self, client_ws: Any) -> bool:
        """Claim a slot for `client_ws`; False when the pool is exhausted."""
        holder = id(client_ws)
        async with self._lock:
            if holder in self._holders:
                return True
            if len(self._holders) >= self._capacity:
                logger.warning("admission: all %s relay slots in use", self._capacity)
                return False
            self._holders.add(holder)
        return True

    async def release(self, client_ws: Any) -> None:
        async with self._lock:
            self._holders.discard(id(client_ws))


__all__ = ["SessionSlots"]
