# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for mutation request, apply time and reset models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from redfish_infra.enums import EnumApplyTimePolicy, EnumMutationMethod, EnumResetType
from redfish_infra.models import (
    ModelApplyImmediate,
    ModelApplyOnReset,
    ModelJobHandle,
    ModelMutationRequest,
    ModelResetRequest,
)
from tests.helpers import ENDPOINT, SYSTEM_URI, VOLUMES_URI


def request_payload(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "endpoint": ENDPOINT,
        "target_url": VOLUMES_URI,
        "method": "POST",
        "capability_uri": VOLUMES_URI,
    }
    payload.update(overrides)
    return payload


@pytest.mark.unit
class TestModelMutationRequest:
    def test_defaults(self) -> None:
        request = ModelMutationRequest.model_validate(request_payload())

        assert request.method is EnumMutationMethod.POST
        assert isinstance(request.apply_time, ModelApplyImmediate)
        assert request.job_timeout_seconds == 1200.0
        assert request.job_poll_interval_seconds == 10.0
        assert request.resolve is None
        assert request.correlation_id is not None

    def test_endpoint_normalised(self) -> None:
        request = ModelMutationRequest.model_validate(
            request_payload(endpoint=f"  {ENDPOINT}/ ")
        )

        assert request.endpoint == ENDPOINT

    def test_apply_time_discriminated_by_policy(self) -> None:
        request = ModelMutationRequest.model_validate(
            request_payload(
                apply_time={
                    "policy": "OnReset",
                    "reset": {"reset_type": "GracefulRestart"},
                },
                system_uri=SYSTEM_URI,
            )
        )

        assert isinstance(request.apply_time, ModelApplyOnReset)
        assert request.apply_time.policy is EnumApplyTimePolicy.ON_RESET
        assert request.apply_time.reset.reset_type is EnumResetType.GRACEFUL_RESTART
        assert request.apply_time.reset.reset_timeout_seconds == 120.0

    def test_immediate_carries_no_reset_fields(self) -> None:
        with pytest.raises(ValidationError):
            ModelMutationRequest.model_validate(
                request_payload(
                    apply_time={"policy": "Immediate", "reset": {"reset_type": "PowerCycle"}}
                )
            )

    def test_unknown_policy_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ModelMutationRequest.model_validate(
                request_payload(apply_time={"policy": "AtMaintenanceWindowStart"})
            )

    def test_on_reset_requires_system_uri(self) -> None:
        with pytest.raises(ValidationError, match="system_uri"):
            ModelMutationRequest.model_validate(
                request_payload(apply_time={"policy": "OnReset"})
            )

    @pytest.mark.parametrize("field", ["job_timeout_seconds", "job_poll_interval_seconds"])
    def test_non_positive_timing_rejected(self, field: str) -> None:
        with pytest.raises(ValidationError):
            ModelMutationRequest.model_validate(request_payload(**{field: 0}))

    def test_blank_endpoint_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ModelMutationRequest.model_validate(request_payload(endpoint=" / "))

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            ModelMutationRequest.model_validate(request_payload(retries=3))


@pytest.mark.unit
class TestModelResetRequest:
    def test_defaults(self) -> None:
        reset = ModelResetRequest()

        assert reset.reset_type is EnumResetType.FORCE_RESTART
        assert reset.reset_timeout_seconds == 120.0
        assert reset.poll_interval_seconds == 10.0

    def test_power_on_is_not_a_reset_type(self) -> None:
        with pytest.raises(ValidationError, match="reset_type"):
            ModelResetRequest(reset_type=EnumResetType.ON)

    def test_on_reset_default_factory(self) -> None:
        assert ModelApplyOnReset().reset == ModelResetRequest()


@pytest.mark.unit
class TestModelJobHandle:
    def test_deadline(self) -> None:
        handle = ModelJobHandle(job_id="/redfish/v1/TaskService/Tasks/JID_1", submitted_at=5.0)

        assert handle.deadline == 1205.0

    def test_blank_job_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ModelJobHandle(job_id="", submitted_at=0.0)
