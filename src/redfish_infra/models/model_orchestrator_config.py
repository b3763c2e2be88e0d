# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Orchestrator Configuration Model.

Default timeouts and poll cadences applied by resource collaborators when
they build mutation requests. Values can be overridden from the environment:

- REDFISH_JOB_TIMEOUT_SECONDS (default: 1200, range: 1-86400)
- REDFISH_JOB_POLL_INTERVAL_SECONDS (default: 10, range: 0.1-600)
- REDFISH_RESET_TIMEOUT_SECONDS (default: 120, range: 1-3600)
- REDFISH_RESET_POLL_INTERVAL_SECONDS (default: 10, range: 0.1-600)
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from redfish_infra.models.model_job_handle import (
    DEFAULT_JOB_POLL_INTERVAL_SECONDS,
    DEFAULT_JOB_TIMEOUT_SECONDS,
)
from redfish_infra.models.model_reset_request import (
    DEFAULT_RESET_POLL_INTERVAL_SECONDS,
    DEFAULT_RESET_TIMEOUT_SECONDS,
)
from redfish_infra.utils.util_env_parsing import parse_env_float

_SERVICE_NAME = "mutation_orchestrator"


class ModelOrchestratorConfig(BaseModel):
    """Timeouts and poll cadences for mutations.

    Example:
        >>> config = ModelOrchestratorConfig.from_env()
        >>> config.job_timeout_seconds
        1200.0
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    job_timeout_seconds: float = Field(
        default=DEFAULT_JOB_TIMEOUT_SECONDS,
        ge=1.0,
        le=86400.0,
        description="Seconds to wait for a job before reporting a timeout",
    )
    job_poll_interval_seconds: float = Field(
        default=DEFAULT_JOB_POLL_INTERVAL_SECONDS,
        ge=0.1,
        le=600.0,
        description="Fixed delay between job polls",
    )
    reset_timeout_seconds: float = Field(
        default=DEFAULT_RESET_TIMEOUT_SECONDS,
        ge=1.0,
        le=3600.0,
        description="Seconds to wait for the host to come back after a reset",
    )
    reset_poll_interval_seconds: float = Field(
        default=DEFAULT_RESET_POLL_INTERVAL_SECONDS,
        ge=0.1,
        le=600.0,
        description="Fixed delay between power state reads",
    )

    @classmethod
    def from_env(cls) -> ModelOrchestratorConfig:
        """Build a configuration from REDFISH_* environment variables.

        Raises:
            ProtocolConfigurationError: If a variable is set but not numeric.
        """
        return cls(
            job_timeout_seconds=parse_env_float(
                "REDFISH_JOB_TIMEOUT_SECONDS",
                DEFAULT_JOB_TIMEOUT_SECONDS,
                min_value=1.0,
                max_value=86400.0,
                service_name=_SERVICE_NAME,
            ),
            job_poll_interval_seconds=parse_env_float(
                "REDFISH_JOB_POLL_INTERVAL_SECONDS",
                DEFAULT_JOB_POLL_INTERVAL_SECONDS,
                min_value=0.1,
                max_value=600.0,
                service_name=_SERVICE_NAME,
            ),
            reset_timeout_seconds=parse_env_float(
                "REDFISH_RESET_TIMEOUT_SECONDS",
                DEFAULT_RESET_TIMEOUT_SECONDS,
                min_value=1.0,
                max_value=3600.0,
                service_name=_SERVICE_NAME,
            ),
            reset_poll_interval_seconds=parse_env_float(
                "REDFISH_RESET_POLL_INTERVAL_SECONDS",
                DEFAULT_RESET_POLL_INTERVAL_SECONDS,
                min_value=0.1,
                max_value=600.0,
                service_name=_SERVICE_NAME,
            ),
        )


__all__ = ["ModelOrchestratorConfig"]
