# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Host Reset Type Enumeration."""

from enum import Enum


class EnumResetType(str, Enum):
    """Reset types sent to ``ComputerSystem.Reset``.

    ON is never configured by callers. It replaces the requested restart type
    when the host is already powered off.
    """

    FORCE_RESTART = "ForceRestart"
    GRACEFUL_RESTART = "GracefulRestart"
    POWER_CYCLE = "PowerCycle"
    ON = "On"


__all__ = ["EnumResetType"]
