# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Redfish Client Configuration Model.

Security Note:
    The password field uses SecretStr to prevent accidental logging of
    credentials. Passwords should come from environment variables or a
    secret store, never from committed configuration files.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator


class ModelRedfishClientConfig(BaseModel):
    """Configuration for one management controller client.

    Attributes:
        endpoint: Controller base URL (e.g. "https://bmc-01.example.com")
        username: Account used for HTTP basic authentication (optional)
        password: Password for username (SecretStr, optional)
        verify_ssl: Whether to verify the controller's TLS certificate
        timeout_seconds: Per-request transport timeout

    Example:
        >>> config = ModelRedfishClientConfig(
        ...     endpoint="https://bmc-01.example.com",
        ...     username="root",
        ...     password=SecretStr("calvin"),
        ...     verify_ssl=False,
        ... )
        >>> print(config.password)
        **********
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    endpoint: str = Field(
        min_length=1,
        description="Controller base URL",
    )
    username: str | None = Field(
        default=None,
        description="HTTP basic authentication user",
    )
    password: SecretStr | None = Field(
        default=None,
        description="HTTP basic authentication password",
    )
    verify_ssl: bool = Field(
        default=True,
        description="Whether to verify the controller TLS certificate",
    )
    timeout_seconds: float = Field(
        default=30.0,
        ge=1.0,
        le=300.0,
        description="Per-request transport timeout in seconds",
    )

    @field_validator("endpoint")
    @classmethod
    def _require_http_scheme(cls, value: str) -> str:
        endpoint = value.strip().rstrip("/")
        if not endpoint.startswith(("http://", "https://")):
            raise ValueError("endpoint must start with http:// or https://")
        return endpoint


__all__: list[str] = ["ModelRedfishClientConfig"]
