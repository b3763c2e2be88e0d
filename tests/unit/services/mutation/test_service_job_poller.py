# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for ServiceJobPoller.

Test Organization:
    - TestServiceJobPollerOutcomes: Completed, Failed and TimedOut paths
    - TestServiceJobPollerTermination: Upper bound on polling duration
    - TestFetchStatus: Job monitor answer normalisation
"""

from __future__ import annotations

import asyncio

import pytest

from redfish_infra.enums import EnumJobState, EnumMutationErrorCode
from redfish_infra.errors import (
    JobFailedError,
    JobTimedOutError,
    ModelMutationErrorContext,
    MutationCancelledError,
    MutationError,
)
from redfish_infra.models import ModelJobHandle
from redfish_infra.services.mutation import ServiceJobPoller
from tests.helpers import (
    JOB_URI,
    VOLUMES_URI,
    FakeManagementClient,
    ManualClock,
    json_response,
    redfish_error,
)

RUNNING = json_response(202, {"TaskState": "Running", "PercentComplete": 40})
COMPLETED = json_response(200, {"TaskState": "Completed", "PercentComplete": 100})


def make_handle(timeout: float = 1200.0, interval: float = 10.0) -> ModelJobHandle:
    return ModelJobHandle(
        job_id=JOB_URI,
        submitted_at=0.0,
        poll_interval_seconds=interval,
        timeout_seconds=timeout,
    )


@pytest.mark.unit
@pytest.mark.asyncio
class TestServiceJobPollerOutcomes:
    async def test_completed_after_two_polls(self) -> None:
        client = FakeManagementClient()
        client.script("GET", JOB_URI, RUNNING, COMPLETED)
        clock = ManualClock()

        status = await ServiceJobPoller(client, clock).wait(make_handle())

        assert status.state is EnumJobState.COMPLETED
        assert status.percent_complete == 100
        assert clock.sleeps == [10.0, 10.0]
        assert clock.monotonic() == 20.0
        assert client.calls_for("GET") == [JOB_URI, JOB_URI]

    async def test_failed_job_carries_controller_message_verbatim(self) -> None:
        client = FakeManagementClient()
        client.script(
            "GET",
            JOB_URI,
            RUNNING,
            json_response(
                200,
                {"TaskState": "Exception", "Messages": [{"Message": "disk not found"}]},
            ),
        )

        with pytest.raises(JobFailedError) as exc_info:
            await ServiceJobPoller(client, ManualClock()).wait(make_handle())

        error = exc_info.value
        assert error.controller_message == "disk not found"
        assert error.model.context["controller_message"] == "disk not found"
        assert error.model.context["job_id"] == JOB_URI
        assert error.mutation_code == EnumMutationErrorCode.JOB_FAILED

    async def test_dell_job_state_failed(self) -> None:
        client = FakeManagementClient()
        client.script(
            "GET",
            JOB_URI,
            json_response(
                200, {"JobState": "Failed", "Message": "Unable to create virtual disk."}
            ),
        )

        with pytest.raises(JobFailedError, match="Unable to create virtual disk."):
            await ServiceJobPoller(client, ManualClock()).wait(make_handle())

    async def test_still_running_at_deadline_times_out(self) -> None:
        client = FakeManagementClient()
        client.script("GET", JOB_URI, RUNNING)
        clock = ManualClock()

        with pytest.raises(JobTimedOutError) as exc_info:
            await ServiceJobPoller(client, clock).wait(make_handle(timeout=60.0))

        error = exc_info.value
        assert clock.monotonic() == 60.0
        assert error.model.context["polls"] == 6
        assert error.model.context["last_state"] == "Running"
        assert error.model.context["timeout_seconds"] == 60.0

    async def test_expired_deadline_still_reads_job_once(self) -> None:
        client = FakeManagementClient()
        client.script("GET", JOB_URI, COMPLETED)
        clock = ManualClock()
        clock.advance(100.0)

        status = await ServiceJobPoller(client, clock).wait(make_handle(timeout=60.0))

        assert status.state is EnumJobState.COMPLETED
        assert client.calls_for("GET") == [JOB_URI]
        assert clock.monotonic() == 100.0

    async def test_expired_deadline_times_out_after_one_running_read(self) -> None:
        client = FakeManagementClient()
        client.script("GET", JOB_URI, RUNNING)
        clock = ManualClock()
        clock.advance(100.0)

        with pytest.raises(JobTimedOutError) as exc_info:
            await ServiceJobPoller(client, clock).wait(make_handle(timeout=60.0))

        assert exc_info.value.model.context["polls"] == 1
        assert exc_info.value.model.context["last_state"] == "Running"

    async def test_anchored_handle_gets_a_fresh_budget(self) -> None:
        client = FakeManagementClient()
        client.script("GET", JOB_URI, RUNNING, COMPLETED)
        clock = ManualClock()
        clock.advance(100.0)
        handle = make_handle(timeout=60.0).anchored_at(clock.monotonic())

        status = await ServiceJobPoller(client, clock).wait(handle)

        assert status.state is EnumJobState.COMPLETED
        assert clock.monotonic() == 120.0

    async def test_transport_failure_during_poll_propagates(self) -> None:
        client = FakeManagementClient()
        client.fail("GET", JOB_URI, MutationError("socket closed"))

        with pytest.raises(MutationError, match="socket closed"):
            await ServiceJobPoller(client, ManualClock()).wait(make_handle())

    async def test_cancel_event_stops_polling_before_next_get(self) -> None:
        client = FakeManagementClient()
        client.script("GET", JOB_URI, RUNNING)
        cancel_event = asyncio.Event()
        cancel_event.set()

        with pytest.raises(MutationCancelledError):
            await ServiceJobPoller(client, ManualClock()).wait(
                make_handle(), cancel_event=cancel_event
            )

        assert client.calls_for("GET") == []


@pytest.mark.unit
@pytest.mark.asyncio
class TestServiceJobPollerTermination:
    @pytest.mark.parametrize(
        "final",
        [
            COMPLETED,
            json_response(200, {"TaskState": "Killed"}),
            RUNNING,
        ],
        ids=["completed", "failed", "timed_out"],
    )
    @pytest.mark.parametrize(("timeout", "interval"), [(60.0, 10.0), (25.0, 10.0), (7.0, 3.0)])
    async def test_polling_ends_within_timeout_plus_interval(
        self, final: object, timeout: float, interval: float
    ) -> None:
        client = FakeManagementClient()
        client.script("GET", JOB_URI, RUNNING, RUNNING, final)
        clock = ManualClock()

        try:
            await ServiceJobPoller(client, clock).wait(make_handle(timeout, interval))
        except (JobFailedError, JobTimedOutError):
            pass

        assert clock.monotonic() <= timeout + interval


@pytest.mark.unit
@pytest.mark.asyncio
class TestFetchStatus:
    @pytest.fixture
    def context(self) -> ModelMutationErrorContext:
        return ModelMutationErrorContext(operation="poll_job", target_name=JOB_URI)

    async def test_accepted_without_body_is_running(
        self, context: ModelMutationErrorContext
    ) -> None:
        client = FakeManagementClient()
        client.script("GET", JOB_URI, json_response(202))

        status = await ServiceJobPoller(client, ManualClock()).fetch_status(JOB_URI, context)

        assert status.state is EnumJobState.RUNNING

    async def test_success_without_state_field_is_completed(
        self, context: ModelMutationErrorContext
    ) -> None:
        """The task monitor returns the created resource once the task is done."""
        client = FakeManagementClient()
        client.script(
            "GET",
            JOB_URI,
            json_response(201, {"@odata.id": f"{VOLUMES_URI}/Disk.Virtual.0"}),
        )

        status = await ServiceJobPoller(client, ManualClock()).fetch_status(JOB_URI, context)

        assert status.state is EnumJobState.COMPLETED
        assert status.raw_state is None

    async def test_error_status_is_job_failure(
        self, context: ModelMutationErrorContext
    ) -> None:
        client = FakeManagementClient()
        client.script("GET", JOB_URI, json_response(500, redfish_error("Internal error")))

        with pytest.raises(JobFailedError) as exc_info:
            await ServiceJobPoller(client, ManualClock()).fetch_status(JOB_URI, context)

        assert exc_info.value.model.context["status_code"] == 500
        assert exc_info.value.controller_message == "Internal error"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("New", EnumJobState.RUNNING),
            ("Pending", EnumJobState.RUNNING),
            ("Completed", EnumJobState.COMPLETED),
            ("CompletedWithErrors", EnumJobState.FAILED),
            ("Cancelled", EnumJobState.FAILED),
        ],
    )
    async def test_state_field_mapping(
        self, context: ModelMutationErrorContext, raw: str, expected: EnumJobState
    ) -> None:
        client = FakeManagementClient()
        client.script("GET", JOB_URI, json_response(200, {"JobState": raw}))

        status = await ServiceJobPoller(client, ManualClock()).fetch_status(JOB_URI, context)

        assert status.state is expected
        assert status.raw_state == raw
