# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Job Handle Model.

A job handle is created when a submission is accepted and lives until the
job poller reaches a terminal state or the job timeout elapses.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_JOB_TIMEOUT_SECONDS: float = 1200.0
DEFAULT_JOB_POLL_INTERVAL_SECONDS: float = 10.0


class ModelJobHandle(BaseModel):
    """Handle on an asynchronous controller job.

    Attributes:
        job_id: Job monitor URI taken verbatim from the Location header
        submitted_at: Monotonic clock reading the job budget is measured from;
            the submission time, moved to the end of the host reset for
            OnReset mutations
        poll_interval_seconds: Fixed delay between job polls
        timeout_seconds: Budget measured from submitted_at
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    job_id: str = Field(min_length=1, description="Job monitor URI")
    submitted_at: float = Field(description="Monotonic timestamp the job budget starts from")
    poll_interval_seconds: float = Field(
        default=DEFAULT_JOB_POLL_INTERVAL_SECONDS,
        gt=0.0,
        description="Seconds between job polls",
    )
    timeout_seconds: float = Field(
        default=DEFAULT_JOB_TIMEOUT_SECONDS,
        gt=0.0,
        description="Seconds after submitted_at before the job is considered timed out",
    )

    @property
    def deadline(self) -> float:
        """Monotonic timestamp after which polling stops with a timeout."""
        return self.submitted_at + self.timeout_seconds

    def anchored_at(self, timestamp: float) -> ModelJobHandle:
        """Return a copy whose job budget starts at ``timestamp``."""
        return self.model_copy(update={"submitted_at": timestamp})


__all__ = [
    "DEFAULT_JOB_POLL_INTERVAL_SECONDS",
    "DEFAULT_JOB_TIMEOUT_SECONDS",
    "ModelJobHandle",
]
