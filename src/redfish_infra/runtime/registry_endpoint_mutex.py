# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Endpoint Mutex Registry.

Serialises mutations per physical controller endpoint. A controller keeps its
own internal job queue and rejects or corrupts conflicting concurrent
requests, so at most one mutation may be in flight per endpoint, across all
resource types.

Lifecycle:
    The registry is an explicit object owned by the orchestrator that
    constructs it (or injected into several orchestrators that must share
    serialisation). There is no module-level singleton.

Concurrency Safety:
    - Per-endpoint locks are asyncio.Lock instances: coroutine-safe, bound to
      the event loop that first awaits them
    - The lock table is guarded by a short-lived threading.Lock held only for
      the lookup-or-insert, never across an await
    - Waiters are not ordered beyond asyncio.Lock's FIFO wake-up

Key Policy:
    Keys are endpoint identity strings with surrounding whitespace and
    trailing slashes removed. Entries are created lazily and kept for the
    registry lifetime: the number of endpoints is bounded by configured
    infrastructure, not by request volume.

Example:
    ```python
    registry = RegistryEndpointMutex()

    async with registry.acquire("https://bmc-01.example.com"):
        ...  # submit, reset, poll, resolve
    ```
"""

from __future__ import annotations

import asyncio
import logging
import threading
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

logger = logging.getLogger(__name__)


def normalise_endpoint(endpoint: str) -> str:
    """Return the registry key for an endpoint identity string."""
    key = endpoint.strip().rstrip("/")
    if not key:
        raise ValueError("endpoint must not be blank")
    return key


class RegistryEndpointMutex:
    """Table of per-endpoint locks with lazy insertion.

    Attributes:
        _locks: Endpoint key to asyncio.Lock
        _table_lock: Guards lookup-or-insert on _locks
    """

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}
        self._table_lock: threading.Lock = threading.Lock()

    def _lock_for(self, key: str) -> asyncio.Lock:
        with self._table_lock:
            lock = self._locks.get(key)
            if lock is None:
                lock = asyncio.Lock()
                self._locks[key] = lock
            return lock

    @asynccontextmanager
    async def acquire(self, endpoint: str) -> AsyncIterator[str]:
        """Hold the endpoint lock for the duration of the ``async with`` block.

        The lock is released on every exit path: normal return, exception and
        task cancellation.

        Args:
            endpoint: Controller endpoint identity

        Yields:
            The normalised endpoint key.

        Raises:
            ValueError: If endpoint is blank.
        """
        key = normalise_endpoint(endpoint)
        lock = self._lock_for(key)

        if lock.locked():
            logger.debug(
                "Waiting for endpoint lock held by another mutation",
                extra={"endpoint": key},
            )
        wait_started = time.monotonic()
        await lock.acquire()
        logger.debug(
            "Endpoint lock acquired",
            extra={
                "endpoint": key,
                "wait_seconds": round(time.monotonic() - wait_started, 3),
            },
        )
        try:
            yield key
        finally:
            lock.release()
            logger.debug("Endpoint lock released", extra={"endpoint": key})

    def is_locked(self, endpoint: str) -> bool:
        """Return True if a mutation currently holds the endpoint lock."""
        key = normalise_endpoint(endpoint)
        with self._table_lock:
            lock = self._locks.get(key)
        return lock is not None and lock.locked()

    def endpoints(self) -> list[str]:
        """Return the endpoint keys seen so far, sorted."""
        with self._table_lock:
            return sorted(self._locks)

    def __len__(self) -> int:
        with self._table_lock:
            return len(self._locks)

    def __contains__(self, endpoint: object) -> bool:
        if not isinstance(endpoint, str):
            return False
        try:
            key = normalise_endpoint(endpoint)
        except ValueError:
            return False
        with self._table_lock:
            return key in self._locks


__all__: list[str] = ["RegistryEndpointMutex", "normalise_endpoint"]
