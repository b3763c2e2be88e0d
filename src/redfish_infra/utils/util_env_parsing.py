# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Environment variable parsing utilities.

Numeric configuration values read from the environment follow one policy:

- Variable not set: the default is returned
- Set but not numeric (or empty): ProtocolConfigurationError
- Numeric but out of range: a WARNING is logged and the default is returned
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from redfish_infra.errors import ModelMutationErrorContext, ProtocolConfigurationError

logger = logging.getLogger(__name__)


def _check_range(
    env_var: str,
    value: float,
    default: float,
    min_value: Optional[float],
    max_value: Optional[float],
    service_name: str,
) -> bool:
    if min_value is not None and value < min_value:
        logger.warning(
            f"{env_var}={value} is below minimum {min_value}, using default {default}",
            extra={"service": service_name, "env_var": env_var},
        )
        return False
    if max_value is not None and value > max_value:
        logger.warning(
            f"{env_var}={value} is above maximum {max_value}, using default {default}",
            extra={"service": service_name, "env_var": env_var},
        )
        return False
    return True


def _config_error(env_var: str, expected: str, service_name: str) -> ProtocolConfigurationError:
    context = ModelMutationErrorContext(
        operation="parse_env",
        target_name=service_name,
    )
    return ProtocolConfigurationError(
        f"Invalid value for {env_var}: expected {expected}",
        context=context,
        env_var=env_var,
    )


def parse_env_float(
    env_var: str,
    default: float,
    *,
    min_value: Optional[float] = None,
    max_value: Optional[float] = None,
    service_name: str = "redfish_infra",
) -> float:
    """Parse a float from the environment.

    Args:
        env_var: Environment variable name
        default: Value used when unset or out of range
        min_value: Inclusive lower bound
        max_value: Inclusive upper bound
        service_name: Service identifier for logs and error context

    Raises:
        ProtocolConfigurationError: If the variable is set but not numeric.
    """
    raw = os.environ.get(env_var)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise _config_error(env_var, "numeric value", service_name) from e
    if not _check_range(env_var, value, default, min_value, max_value, service_name):
        return default
    return value


def parse_env_int(
    env_var: str,
    default: int,
    *,
    min_value: Optional[int] = None,
    max_value: Optional[int] = None,
    service_name: str = "redfish_infra",
) -> int:
    """Parse an integer from the environment.

    Raises:
        ProtocolConfigurationError: If the variable is set but not an integer.
    """
    raw = os.environ.get(env_var)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise _config_error(env_var, "integer value", service_name) from e
    if not _check_range(env_var, value, default, min_value, max_value, service_name):
        return default
    return value


__all__ = ["parse_env_float", "parse_env_int"]
