# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for clock utilities."""

from __future__ import annotations

import asyncio

import pytest

from redfish_infra.utils import MonotonicClock, sleep_or_cancel
from tests.helpers import ManualClock


@pytest.mark.unit
@pytest.mark.asyncio
class TestSleepOrCancel:
    async def test_without_event_sleeps_full_interval(self) -> None:
        clock = ManualClock()

        cancelled = await sleep_or_cancel(clock, 10.0)

        assert cancelled is False
        assert clock.monotonic() == 10.0

    async def test_pre_set_event_skips_sleep(self) -> None:
        clock = ManualClock()
        event = asyncio.Event()
        event.set()

        assert await sleep_or_cancel(clock, 10.0, event) is True
        assert clock.sleeps == []

    async def test_unset_event_returns_after_sleep(self) -> None:
        clock = ManualClock()

        assert await sleep_or_cancel(clock, 10.0, asyncio.Event()) is False
        assert clock.monotonic() == 10.0

    async def test_event_set_during_real_sleep_wakes_early(self) -> None:
        event = asyncio.Event()
        loop = asyncio.get_running_loop()
        loop.call_later(0.01, event.set)

        cancelled = await asyncio.wait_for(
            sleep_or_cancel(MonotonicClock(), 30.0, event), timeout=5.0
        )

        assert cancelled is True


@pytest.mark.unit
class TestMonotonicClock:
    def test_monotonic_never_decreases(self) -> None:
        clock = MonotonicClock()
        first = clock.monotonic()

        assert clock.monotonic() >= first
