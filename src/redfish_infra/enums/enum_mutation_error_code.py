# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Mutation Error Code Enumeration.

Fine-grained codes for the mutation core. Each error also carries an
EnumCoreErrorCode; this code tells apart failures that share one (a reset
timeout and a job timeout are both TIMEOUT_ERROR).
"""

from enum import Enum


class EnumMutationErrorCode(str, Enum):
    """Error classification codes for mutation failures."""

    OPERATION_FAILED = "OPERATION_FAILED"
    INVALID_CONFIGURATION = "INVALID_CONFIGURATION"
    CAPABILITY_UNSUPPORTED = "CAPABILITY_UNSUPPORTED"
    SUBMISSION_REJECTED = "SUBMISSION_REJECTED"
    MISSING_JOB_LOCATION = "MISSING_JOB_LOCATION"
    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    UNEXPECTED_RESPONSE = "UNEXPECTED_RESPONSE"
    RESET_REJECTED = "RESET_REJECTED"
    RESET_TIMEOUT = "RESET_TIMEOUT"
    JOB_FAILED = "JOB_FAILED"
    JOB_TIMED_OUT = "JOB_TIMED_OUT"
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    AMBIGUOUS_MATCH = "AMBIGUOUS_MATCH"
    CANCELLED = "CANCELLED"


__all__ = ["EnumMutationErrorCode"]
