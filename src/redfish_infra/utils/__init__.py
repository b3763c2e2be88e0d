# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Utility functions for the Redfish infrastructure package."""

from redfish_infra.utils.util_clock import MonotonicClock, sleep_or_cancel
from redfish_infra.utils.util_env_parsing import parse_env_float, parse_env_int

__all__: list[str] = [
    "MonotonicClock",
    "parse_env_float",
    "parse_env_int",
    "sleep_or_cancel",
]
