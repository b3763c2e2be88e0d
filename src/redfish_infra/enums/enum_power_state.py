# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Host Power State Enumeration."""

from enum import Enum


class EnumPowerState(str, Enum):
    """Power states reported by a ComputerSystem resource."""

    ON = "On"
    OFF = "Off"
    POWERING_ON = "PoweringOn"
    POWERING_OFF = "PoweringOff"


__all__ = ["EnumPowerState"]
