# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Redfish Infrastructure Enumerations Module.

Exports:
    EnumApplyTimePolicy: Immediate vs OnReset apply time policy
    EnumJobState: Observed controller job state (Running, Completed, Failed, TimedOut)
    EnumMutationErrorCode: Error classification codes for mutation failures
    EnumMutationMethod: HTTP method used to submit a mutation
    EnumMutationPhase: Mutation phase carried in error context
    EnumPowerState: Host power state reported by a ComputerSystem
    EnumResetType: Reset type sent to ComputerSystem.Reset
"""

from redfish_infra.enums.enum_apply_time_policy import EnumApplyTimePolicy
from redfish_infra.enums.enum_job_state import EnumJobState
from redfish_infra.enums.enum_mutation_error_code import EnumMutationErrorCode
from redfish_infra.enums.enum_mutation_method import EnumMutationMethod
from redfish_infra.enums.enum_mutation_phase import EnumMutationPhase
from redfish_infra.enums.enum_power_state import EnumPowerState
from redfish_infra.enums.enum_reset_type import EnumResetType

__all__: list[str] = [
    "EnumApplyTimePolicy",
    "EnumJobState",
    "EnumMutationErrorCode",
    "EnumMutationMethod",
    "EnumMutationPhase",
    "EnumPowerState",
    "EnumResetType",
]
