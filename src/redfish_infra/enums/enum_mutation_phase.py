# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Mutation Phase Enumeration.

Identifies the phase of a mutation in which an error occurred. Carried in
error context and log records so failures can be diagnosed without
re-running the mutation.
"""

from enum import Enum


class EnumMutationPhase(str, Enum):
    """Phases of a single mutation, in execution order."""

    CAPABILITY_CHECK = "capability_check"
    SUBMISSION = "submission"
    POWER_RESET = "power_reset"
    JOB_POLL = "job_poll"
    ENTITY_RESOLUTION = "entity_resolution"
    READ = "read"


__all__ = ["EnumMutationPhase"]
