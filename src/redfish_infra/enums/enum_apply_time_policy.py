# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Operation Apply Time Policy Enumeration.

Selects whether a management controller commits a change immediately or
stages it until the next host reset. Values match the Redfish
``@Redfish.OperationApplyTime`` vocabulary so they can be sent verbatim.
"""

from enum import Enum


class EnumApplyTimePolicy(str, Enum):
    """Apply time policies accepted by a controller sub-resource.

    Attributes:
        IMMEDIATE: The controller applies the change as soon as it is accepted.
        ON_RESET: The change is staged and committed on the next host reset.
    """

    IMMEDIATE = "Immediate"
    ON_RESET = "OnReset"


__all__ = ["EnumApplyTimePolicy"]
