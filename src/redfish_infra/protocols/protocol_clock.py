# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol definition for the clock used by poll loops."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

__all__ = ["ProtocolClock"]


@runtime_checkable
class ProtocolClock(Protocol):
    """Monotonic time source with an awaitable sleep.

    ``monotonic()`` must never go backwards. ``sleep()`` suspends the calling
    coroutine and must be cancellable.
    """

    def monotonic(self) -> float:
        """Return the current monotonic time in seconds."""
        ...

    async def sleep(self, seconds: float) -> None:
        """Suspend for ``seconds``."""
        ...
