# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for ModelRedfishClientConfig."""

from __future__ import annotations

import pytest
from pydantic import SecretStr, ValidationError

from redfish_infra.handlers import ModelRedfishClientConfig


@pytest.mark.unit
class TestModelRedfishClientConfig:
    def test_defaults(self) -> None:
        config = ModelRedfishClientConfig(endpoint="https://bmc-01.example.com")

        assert config.verify_ssl is True
        assert config.timeout_seconds == 30.0
        assert config.username is None
        assert config.password is None

    def test_trailing_slash_stripped(self) -> None:
        config = ModelRedfishClientConfig(endpoint=" https://bmc-01.example.com/ ")

        assert config.endpoint == "https://bmc-01.example.com"

    @pytest.mark.parametrize("endpoint", ["bmc-01.example.com", "ftp://bmc-01", ""])
    def test_endpoint_requires_http_scheme(self, endpoint: str) -> None:
        with pytest.raises(ValidationError):
            ModelRedfishClientConfig(endpoint=endpoint)

    def test_password_is_masked(self) -> None:
        config = ModelRedfishClientConfig(
            endpoint="https://bmc-01.example.com",
            username="root",
            password=SecretStr("calvin"),
        )

        assert "calvin" not in repr(config)
        assert config.password is not None
        assert config.password.get_secret_value() == "calvin"

    @pytest.mark.parametrize("timeout", [0.5, 301.0])
    def test_timeout_bounds(self, timeout: float) -> None:
        with pytest.raises(ValidationError):
            ModelRedfishClientConfig(
                endpoint="https://bmc-01.example.com", timeout_seconds=timeout
            )

    def test_frozen(self) -> None:
        config = ModelRedfishClientConfig(endpoint="https://bmc-01.example.com")

        with pytest.raises(ValidationError):
            config.verify_ssl = False  # type: ignore[misc]
