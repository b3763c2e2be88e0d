# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for ModelServiceResponse and ModelJobStatus."""

from __future__ import annotations

import pytest

from redfish_infra.enums import EnumJobState
from redfish_infra.models import ModelJobStatus, ModelServiceResponse
from tests.helpers import redfish_error


@pytest.mark.unit
class TestModelServiceResponse:
    def test_header_lookup_is_case_insensitive(self) -> None:
        response = ModelServiceResponse(
            status_code=202, headers={"Location": "/redfish/v1/TaskService/Tasks/JID_1"}
        )

        assert response.header("LOCATION") == "/redfish/v1/TaskService/Tasks/JID_1"
        assert response.header("Retry-After") is None

    @pytest.mark.parametrize(
        ("status_code", "success"), [(200, True), (204, True), (299, True), (301, False), (404, False)]
    )
    def test_is_success(self, status_code: int, success: bool) -> None:
        assert ModelServiceResponse(status_code=status_code).is_success is success

    def test_extended_message_preferred(self) -> None:
        response = ModelServiceResponse(
            status_code=400, body=redfish_error("Drive Disk.Bay.9 is not ready.")
        )

        assert response.error_message() == "Drive Disk.Bay.9 is not ready."

    def test_plain_error_message(self) -> None:
        response = ModelServiceResponse(
            status_code=500, body={"error": {"message": "Internal error"}}
        )

        assert response.error_message() == "Internal error"

    @pytest.mark.parametrize("body", [None, "text", ["list"], {"Members": []}])
    def test_no_error_message(self, body: object) -> None:
        response = ModelServiceResponse(status_code=500, body=body)

        assert response.error_message() is None


@pytest.mark.unit
class TestModelJobStatus:
    def test_task_payload(self) -> None:
        status = ModelJobStatus.from_payload(
            {
                "TaskState": "Running",
                "PercentComplete": 35,
                "Messages": [{"Message": "Creating virtual disk."}],
            }
        )

        assert status is not None
        assert status.state is EnumJobState.RUNNING
        assert status.percent_complete == 35
        assert status.message == "Creating virtual disk."

    def test_dell_job_payload_prefers_message(self) -> None:
        status = ModelJobStatus.from_payload(
            {"JobState": "Completed", "Message": "Job completed successfully."}
        )

        assert status is not None
        assert status.state is EnumJobState.COMPLETED
        assert status.message == "Job completed successfully."

    def test_payload_without_state_field(self) -> None:
        assert ModelJobStatus.from_payload({"Id": "Disk.Virtual.0"}) is None

    @pytest.mark.parametrize("percent", [-1, 101, "50", True])
    def test_invalid_percent_dropped(self, percent: object) -> None:
        status = ModelJobStatus.from_payload({"TaskState": "Running", "PercentComplete": percent})

        assert status is not None
        assert status.percent_complete is None

    def test_terminal_states(self) -> None:
        assert EnumJobState.COMPLETED.is_terminal
        assert EnumJobState.FAILED.is_terminal
        assert EnumJobState.TIMED_OUT.is_terminal
        assert not EnumJobState.RUNNING.is_terminal
