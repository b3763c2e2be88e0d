# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Clock utilities for the poll loops.

Both poll loops (power reset wait and job wait) measure deadlines with a
monotonic clock and suspend with the clock's ``sleep``. Tests inject a
virtual clock so deadline arithmetic runs without real waiting.
"""

from __future__ import annotations

import asyncio
import time
from typing import Optional

from redfish_infra.protocols.protocol_clock import ProtocolClock


class MonotonicClock:
    """Wall-clock implementation of ProtocolClock."""

    def monotonic(self) -> float:
        return time.monotonic()

    async def sleep(self, seconds: float) -> None:
        await asyncio.sleep(seconds)


async def sleep_or_cancel(
    clock: ProtocolClock,
    seconds: float,
    cancel_event: Optional[asyncio.Event] = None,
) -> bool:
    """Sleep for ``seconds`` unless ``cancel_event`` is set first.

    Returns:
        True if the cancel event was set before or during the sleep.
    """
    if cancel_event is None:
        await clock.sleep(seconds)
        return False
    if cancel_event.is_set():
        return True

    sleeper = asyncio.ensure_future(clock.sleep(seconds))
    waiter = asyncio.ensure_future(cancel_event.wait())
    try:
        await asyncio.wait({sleeper, waiter}, return_when=asyncio.FIRST_COMPLETED)
    finally:
        for task in (sleeper, waiter):
            if not task.done():
                task.cancel()
        await asyncio.gather(sleeper, waiter, return_exceptions=True)
    return cancel_event.is_set()


__all__ = ["MonotonicClock", "sleep_or_cancel"]
