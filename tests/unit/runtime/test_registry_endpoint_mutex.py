# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for RegistryEndpointMutex.

Test Organization:
    - TestNormaliseEndpoint: Key normalisation
    - TestRegistryEndpointMutexSerialisation: One holder per endpoint
    - TestRegistryEndpointMutexRelease: Release on every exit path
"""

from __future__ import annotations

import asyncio

import pytest

from redfish_infra.runtime import RegistryEndpointMutex, normalise_endpoint


@pytest.mark.unit
class TestNormaliseEndpoint:
    def test_strips_whitespace_and_trailing_slashes(self) -> None:
        assert normalise_endpoint("  https://bmc-01.example.com//  ") == (
            "https://bmc-01.example.com"
        )

    @pytest.mark.parametrize("blank", ["", "   ", "/", "//"])
    def test_blank_endpoint_rejected(self, blank: str) -> None:
        with pytest.raises(ValueError, match="blank"):
            normalise_endpoint(blank)


@pytest.mark.unit
@pytest.mark.asyncio
class TestRegistryEndpointMutexSerialisation:
    async def test_no_overlapping_holders_for_same_endpoint(self) -> None:
        """Concurrent holders of one endpoint never overlap."""
        registry = RegistryEndpointMutex()
        in_flight = 0
        max_in_flight = 0
        completed = 0

        async def hold() -> None:
            nonlocal in_flight, max_in_flight, completed
            async with registry.acquire("https://bmc-01.example.com"):
                in_flight += 1
                max_in_flight = max(max_in_flight, in_flight)
                for _ in range(5):
                    await asyncio.sleep(0)
                in_flight -= 1
                completed += 1

        await asyncio.gather(*(hold() for _ in range(8)))

        assert max_in_flight == 1
        assert completed == 8

    async def test_different_endpoints_do_not_block_each_other(self) -> None:
        registry = RegistryEndpointMutex()
        second_acquired = asyncio.Event()

        async def first() -> None:
            async with registry.acquire("https://bmc-01.example.com"):
                await asyncio.wait_for(second_acquired.wait(), timeout=1.0)

        async def second() -> None:
            async with registry.acquire("https://bmc-02.example.com"):
                second_acquired.set()

        await asyncio.gather(first(), second())

    async def test_equivalent_endpoints_share_one_lock(self) -> None:
        registry = RegistryEndpointMutex()

        async with registry.acquire("https://bmc-01.example.com/") as key:
            assert key == "https://bmc-01.example.com"
            assert registry.is_locked(" https://bmc-01.example.com")

        assert len(registry) == 1
        assert "https://bmc-01.example.com/" in registry
        assert registry.endpoints() == ["https://bmc-01.example.com"]

    async def test_waiter_acquires_after_holder_releases(self) -> None:
        registry = RegistryEndpointMutex()
        order: list[str] = []
        holder_entered = asyncio.Event()

        async def holder() -> None:
            async with registry.acquire("bmc-01"):
                holder_entered.set()
                order.append("holder-start")
                await asyncio.sleep(0)
                order.append("holder-end")

        async def waiter() -> None:
            await holder_entered.wait()
            async with registry.acquire("bmc-01"):
                order.append("waiter")

        await asyncio.gather(holder(), waiter())

        assert order == ["holder-start", "holder-end", "waiter"]


@pytest.mark.unit
@pytest.mark.asyncio
class TestRegistryEndpointMutexRelease:
    async def test_released_when_body_raises(self) -> None:
        registry = RegistryEndpointMutex()

        with pytest.raises(RuntimeError, match="boom"):
            async with registry.acquire("bmc-01"):
                raise RuntimeError("boom")

        assert registry.is_locked("bmc-01") is False
        async with registry.acquire("bmc-01"):
            pass

    async def test_released_when_holder_is_cancelled(self) -> None:
        registry = RegistryEndpointMutex()
        entered = asyncio.Event()

        async def hold_forever() -> None:
            async with registry.acquire("bmc-01"):
                entered.set()
                await asyncio.Event().wait()

        task = asyncio.create_task(hold_forever())
        await entered.wait()
        assert registry.is_locked("bmc-01") is True

        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert registry.is_locked("bmc-01") is False

    async def test_unknown_endpoint_is_not_locked(self) -> None:
        registry = RegistryEndpointMutex()

        assert registry.is_locked("bmc-99") is False
        assert "bmc-99" not in registry
        assert 42 not in registry
