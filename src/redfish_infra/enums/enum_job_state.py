# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Job State Enumeration.

States of a controller job as observed by the job poller. Once a job reaches
a terminal state, polling stops.
"""

from enum import Enum


class EnumJobState(str, Enum):
    """Observed state of an asynchronous controller job.

    State Transitions:
        RUNNING -> COMPLETED: job resource reports success
        RUNNING -> FAILED: job resource reports failure
        RUNNING -> TIMED_OUT: poll deadline passed while still running
    """

    RUNNING = "Running"
    COMPLETED = "Completed"
    FAILED = "Failed"
    TIMED_OUT = "TimedOut"

    @property
    def is_terminal(self) -> bool:
        """Return True for states that stop polling."""
        return self is not EnumJobState.RUNNING


__all__ = ["EnumJobState"]
