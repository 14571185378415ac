"""
Unit tests for JobLifecycleController.
"""

import asyncio
import dataclasses
from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from repairtrack.application.interfaces.services import JobCodeGeneratorInterface
from repairtrack.application.services.job_code_generator import CountingJobCodeGenerator
from repairtrack.application.services.message_templates import NotificationTemplates
from repairtrack.application.services.notification_dispatcher import (
    NotificationDispatcher,
)
from repairtrack.application.session import SessionContext
from repairtrack.application.use_cases.job_lifecycle import (
    CreateJobRequest,
    JobLifecycleController,
)
from repairtrack.domain.entities.job import Job
from repairtrack.domain.exceptions.notification_error import NotificationDeliveryError
from repairtrack.domain.exceptions.repository_error import (
    DuplicateJobError,
    JobNotFoundError,
    RepositoryError,
)
from repairtrack.domain.exceptions.session_error import SubmissionInProgressError
from repairtrack.domain.exceptions.validation_error import (
    InvalidFormatError,
    InvalidStatusTransitionError,
    ProfileRequiredError,
    RequiredFieldError,
    ValidationError,
)
from repairtrack.domain.value_objects.job_code import JOB_CODE_PATTERN, JobCode
from repairtrack.domain.value_objects.job_filter import JobFilter
from repairtrack.domain.value_objects.job_status import JobStatus


def clock_2025():
    return datetime(2025, 6, 1, 10, 0, tzinfo=timezone.utc)


class TestJobLifecycleController:
    """Test cases for JobLifecycleController."""

    @pytest.fixture
    def code_generator(self):
        generator = AsyncMock(spec=JobCodeGeneratorInterface)
        generator.next_code = AsyncMock(return_value=JobCode(year=2025, sequence=1))
        return generator

    @pytest.fixture
    def dispatcher(self, recording_sender):
        return NotificationDispatcher(recording_sender)

    @pytest.fixture
    def templates(self):
        return NotificationTemplates(public_base_url="https://repairtrack.example.com")

    @pytest.fixture
    def controller(
        self,
        session_context,
        mock_job_repository,
        code_generator,
        dispatcher,
        mock_transaction,
        templates,
    ):
        return JobLifecycleController(
            session=session_context,
            job_repo=mock_job_repository,
            code_generator=code_generator,
            dispatcher=dispatcher,
            transaction=mock_transaction,
            templates=templates,
        )

    @pytest.fixture
    def create_request(self):
        return CreateJobRequest(
            customer_name="Asha",
            customer_whatsapp="9876543210",
            item_name="Phone",
            problem="Cracked screen",
            price=500,
        )

    @pytest.mark.asyncio
    async def test_create_job_success(
        self, controller, create_request, mock_job_repository, mock_transaction, session_context
    ):
        """A new job is Received, coded, committed and cached first."""
        job = await controller.create_job(create_request)

        assert job.status is JobStatus.RECEIVED
        assert JOB_CODE_PATTERN.match(job.job_code)
        assert job.price == Decimal("500")
        assert job.user_id == "user-1"
        mock_job_repository.create.assert_called_once()
        mock_transaction.commit.assert_called_once()
        mock_transaction.rollback.assert_not_called()
        assert session_context.jobs[0] is job
        assert session_context.submitting is False

    @pytest.mark.asyncio
    async def test_create_job_notifies_customer(
        self, controller, create_request, dispatcher, recording_sender
    ):
        job = await controller.create_job(create_request)
        await dispatcher.drain()

        assert len(recording_sender.sent) == 1
        message = recording_sender.sent[0]
        assert message.to == "+919876543210"
        assert message.body == f"Hi Asha, we’ve received your Phone. Job: {job.job_code}."

    @pytest.mark.asyncio
    async def test_create_job_end_to_end_example(
        self, session_context, mock_job_repository, mock_transaction, templates, recording_sender
    ):
        """Three jobs already exist in 2025, so the next one is RT-2025-000004."""
        mock_job_repository.count_for_user = AsyncMock(return_value=3)
        dispatcher = NotificationDispatcher(recording_sender)
        controller = JobLifecycleController(
            session=session_context,
            job_repo=mock_job_repository,
            code_generator=CountingJobCodeGenerator(mock_job_repository, clock=clock_2025),
            dispatcher=dispatcher,
            transaction=mock_transaction,
            templates=templates,
        )

        job = await controller.create_job(
            CreateJobRequest(
                customer_name="Asha",
                customer_whatsapp="9876543210",
                item_name="Phone",
                problem="Screen",
                price=500,
            )
        )
        await dispatcher.drain()

        assert job.job_code == "RT-2025-000004"
        assert job.status is JobStatus.RECEIVED
        assert recording_sender.sent[0].to == "+919876543210"
        assert "RT-2025-000004" in recording_sender.sent[0].body

    @pytest.mark.asyncio
    async def test_create_job_requires_profile(
        self, controller, create_request, session_context, mock_job_repository, code_generator
    ):
        session_context.profile = None

        with pytest.raises(ProfileRequiredError, match="complete your profile"):
            await controller.create_job(create_request)

        code_generator.next_code.assert_not_called()
        mock_job_repository.create.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "field_name", ["customer_name", "customer_whatsapp", "item_name", "problem"]
    )
    async def test_create_job_required_fields(
        self,
        controller,
        create_request,
        field_name,
        mock_job_repository,
        code_generator,
        dispatcher,
    ):
        request = dataclasses.replace(create_request, **{field_name: "   "})

        with pytest.raises(RequiredFieldError) as exc_info:
            await controller.create_job(request)

        assert exc_info.value.field_name == field_name
        code_generator.next_code.assert_not_called()
        mock_job_repository.create.assert_not_called()
        assert dispatcher.pending_count == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "changes",
        [
            {"customer_whatsapp": "12345"},
            {"customer_whatsapp": "+449876543210"},
            {"price": -1},
            {"price": "abc"},
            {"price": "NaN"},
        ],
    )
    async def test_create_job_invalid_input(
        self, controller, create_request, changes, mock_job_repository
    ):
        with pytest.raises(InvalidFormatError):
            await controller.create_job(dataclasses.replace(create_request, **changes))

        mock_job_repository.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_job_price_defaults_to_zero(self, controller, create_request):
        job = await controller.create_job(dataclasses.replace(create_request, price=None))

        assert job.price == Decimal("0")

    @pytest.mark.asyncio
    async def test_create_job_repository_failure(
        self,
        controller,
        create_request,
        mock_job_repository,
        mock_transaction,
        session_context,
        dispatcher,
    ):
        """A failed insert rolls back and leaves the cache and customer alone."""
        mock_job_repository.create = AsyncMock(side_effect=RepositoryError("insert failed"))

        with pytest.raises(RepositoryError):
            await controller.create_job(create_request)

        mock_transaction.rollback.assert_called_once()
        mock_transaction.commit.assert_not_called()
        assert session_context.jobs == []
        assert dispatcher.pending_count == 0
        assert session_context.submitting is False

    @pytest.mark.asyncio
    async def test_create_job_commit_failure(
        self, controller, create_request, mock_transaction, session_context
    ):
        mock_transaction.commit = AsyncMock(side_effect=RepositoryError("commit failed"))

        with pytest.raises(RepositoryError):
            await controller.create_job(create_request)

        mock_transaction.rollback.assert_called_once()
        assert session_context.jobs == []

    @pytest.mark.asyncio
    async def test_create_job_rejects_reentrant_submission(
        self, controller, create_request, mock_job_repository
    ):
        """A second submission while the first is in flight is refused."""
        release = asyncio.Event()

        async def slow_create(job):
            await release.wait()
            return job

        mock_job_repository.create = AsyncMock(side_effect=slow_create)

        first = asyncio.ensure_future(controller.create_job(create_request))
        await asyncio.sleep(0)

        with pytest.raises(SubmissionInProgressError):
            await controller.create_job(create_request)

        release.set()
        job = await first
        assert job.status is JobStatus.RECEIVED
        mock_job_repository.create.assert_called_once()

        # The flag is cleared once the first submission finishes
        await controller.create_job(create_request)
        assert mock_job_repository.create.call_count == 2

    @pytest.mark.asyncio
    async def test_create_job_with_known_request_id_returns_existing(
        self,
        controller,
        create_request,
        mock_job_repository,
        code_generator,
        sample_job,
        dispatcher,
    ):
        mock_job_repository.get_by_request_id = AsyncMock(return_value=sample_job)

        job = await controller.create_job(
            dataclasses.replace(create_request, request_id="req-1")
        )

        assert job is sample_job
        mock_job_repository.get_by_request_id.assert_called_once_with("user-1", "req-1")
        code_generator.next_code.assert_not_called()
        mock_job_repository.create.assert_not_called()
        assert dispatcher.pending_count == 0

    @pytest.mark.asyncio
    async def test_create_job_lost_request_id_race_returns_winner(
        self,
        controller,
        create_request,
        mock_job_repository,
        mock_transaction,
        session_context,
        sample_job,
        dispatcher,
    ):
        """The same request id committed by another session is returned, not a 500."""
        winner = dataclasses.replace(sample_job, request_id="req-7")
        mock_job_repository.get_by_request_id = AsyncMock(side_effect=[None, winner])
        mock_job_repository.create = AsyncMock(
            side_effect=DuplicateJobError("Job RT-2025-000002 could not be saved")
        )

        job = await controller.create_job(
            dataclasses.replace(create_request, request_id="req-7")
        )

        assert job is winner
        mock_transaction.rollback.assert_called_once()
        mock_transaction.commit.assert_not_called()
        assert session_context.jobs == [winner]
        assert dispatcher.pending_count == 0

    @pytest.mark.asyncio
    async def test_create_job_duplicate_code_without_request_id(
        self, controller, create_request, mock_job_repository, session_context
    ):
        mock_job_repository.create = AsyncMock(
            side_effect=DuplicateJobError("Job RT-2025-000001 could not be saved")
        )

        with pytest.raises(DuplicateJobError):
            await controller.create_job(create_request)

        mock_job_repository.get_by_request_id.assert_not_called()
        assert session_context.jobs == []

    @pytest.mark.asyncio
    async def test_create_job_stores_request_id(self, controller, create_request):
        job = await controller.create_job(
            dataclasses.replace(create_request, request_id="req-2", notes="  ")
        )

        assert job.request_id == "req-2"
        assert job.notes is None

    @pytest.mark.asyncio
    async def test_notification_failure_does_not_fail_create(
        self, session_context, mock_job_repository, code_generator, mock_transaction, templates
    ):
        sender = AsyncMock()
        sender.name = "failing"
        sender.send = AsyncMock(side_effect=NotificationDeliveryError(500, "down"))
        dispatcher = NotificationDispatcher(sender)
        controller = JobLifecycleController(
            session=session_context,
            job_repo=mock_job_repository,
            code_generator=code_generator,
            dispatcher=dispatcher,
            transaction=mock_transaction,
            templates=templates,
        )

        job = await controller.create_job(
            CreateJobRequest(
                customer_name="Asha",
                customer_whatsapp="9876543210",
                item_name="Phone",
                problem="Screen",
            )
        )
        await dispatcher.drain()

        assert job.status is JobStatus.RECEIVED
        assert session_context.jobs == [job]
        sender.send.assert_called_once()

    @pytest.mark.asyncio
    async def test_update_job_status_success(
        self,
        controller,
        sample_job,
        session_context,
        mock_job_repository,
        mock_transaction,
        dispatcher,
        recording_sender,
    ):
        """The cached job is replaced by the repository's copy."""
        session_context.reset_jobs([sample_job])
        updated = dataclasses.replace(sample_job, status=JobStatus.IN_PROGRESS)
        mock_job_repository.update_status = AsyncMock(return_value=updated)

        job = await controller.update_job_status(sample_job.id, "In Progress")
        await dispatcher.drain()

        assert job.status is JobStatus.IN_PROGRESS
        mock_job_repository.update_status.assert_called_once_with(
            "user-1", sample_job.id, JobStatus.IN_PROGRESS
        )
        mock_transaction.commit.assert_called_once()
        assert session_context.jobs == [updated]
        assert recording_sender.sent[0].body == (
            'Update for Job RT-2025-000001: Status changed to "In Progress".'
        )

    @pytest.mark.asyncio
    async def test_update_job_status_allows_any_move_by_default(
        self, controller, sample_job, session_context, mock_job_repository
    ):
        completed = dataclasses.replace(sample_job, status=JobStatus.COMPLETED)
        session_context.reset_jobs([completed])
        reopened = dataclasses.replace(sample_job, status=JobStatus.RECEIVED)
        mock_job_repository.update_status = AsyncMock(return_value=reopened)

        job = await controller.update_job_status(sample_job.id, JobStatus.RECEIVED)

        assert job.status is JobStatus.RECEIVED
        mock_job_repository.get_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_job_status_invalid_status(self, controller, mock_job_repository):
        with pytest.raises(ValidationError, match="Invalid status"):
            await controller.update_job_status(uuid4(), "Shipped")

        mock_job_repository.update_status.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_job_status_failure_leaves_cache(
        self,
        controller,
        sample_job,
        session_context,
        mock_job_repository,
        mock_transaction,
        dispatcher,
    ):
        session_context.reset_jobs([sample_job])
        mock_job_repository.update_status = AsyncMock(
            side_effect=JobNotFoundError(str(sample_job.id))
        )

        with pytest.raises(JobNotFoundError):
            await controller.update_job_status(sample_job.id, "Completed")

        mock_transaction.rollback.assert_called_once()
        assert session_context.jobs[0].status is JobStatus.RECEIVED
        assert dispatcher.pending_count == 0

    @pytest.mark.asyncio
    async def test_update_job_status_enforced_transitions(
        self, controller, sample_job, session_context, mock_job_repository
    ):
        controller.enforce_transitions = True
        completed = dataclasses.replace(sample_job, status=JobStatus.COMPLETED)
        session_context.reset_jobs([completed])

        with pytest.raises(InvalidStatusTransitionError):
            await controller.update_job_status(sample_job.id, "Received")

        mock_job_repository.update_status.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_job_status_enforced_allows_same_status(
        self, controller, sample_job, session_context, mock_job_repository
    ):
        controller.enforce_transitions = True
        in_progress = dataclasses.replace(sample_job, status=JobStatus.IN_PROGRESS)
        session_context.reset_jobs([in_progress])
        mock_job_repository.update_status = AsyncMock(return_value=in_progress)

        job = await controller.update_job_status(sample_job.id, "In Progress")

        assert job.status is JobStatus.IN_PROGRESS
        mock_job_repository.update_status.assert_called_once_with(
            "user-1", sample_job.id, JobStatus.IN_PROGRESS
        )

    @pytest.mark.asyncio
    async def test_update_job_status_enforced_loads_uncached_job(
        self, controller, sample_job, mock_job_repository
    ):
        controller.enforce_transitions = True
        mock_job_repository.get_by_id = AsyncMock(return_value=sample_job)
        updated = dataclasses.replace(sample_job, status=JobStatus.AWAITING_PARTS)
        mock_job_repository.update_status = AsyncMock(return_value=updated)

        job = await controller.update_job_status(sample_job.id, "Awaiting Parts")

        assert job.status is JobStatus.AWAITING_PARTS
        mock_job_repository.get_by_id.assert_called_once_with("user-1", sample_job.id)

    @pytest.mark.asyncio
    async def test_update_job_status_enforced_unknown_job(
        self, controller, mock_job_repository
    ):
        controller.enforce_transitions = True
        mock_job_repository.get_by_id = AsyncMock(return_value=None)

        with pytest.raises(JobNotFoundError):
            await controller.update_job_status(uuid4(), "Completed")

    @pytest.mark.asyncio
    async def test_cache_converges_with_repository(
        self, controller, create_request, session_context, mock_job_repository
    ):
        """After a create and an update the cache equals a fresh load."""
        stored = {}

        async def create(job):
            stored[job.id] = job
            return job

        async def update_status(user_id, job_id, status):
            job = dataclasses.replace(stored[job_id], status=status)
            stored[job_id] = job
            return job

        async def list_for_user(user_id):
            return sorted(stored.values(), key=lambda job: job.created_at, reverse=True)

        mock_job_repository.create = AsyncMock(side_effect=create)
        mock_job_repository.update_status = AsyncMock(side_effect=update_status)
        mock_job_repository.list_for_user = AsyncMock(side_effect=list_for_user)

        job = await controller.create_job(create_request)
        await controller.update_job_status(job.id, "Completed")
        cached = list(session_context.jobs)

        assert cached == await controller.refresh()

    @pytest.mark.asyncio
    async def test_refresh_and_filter(
        self, controller, sample_job, session_context, mock_job_repository
    ):
        done = Job(
            user_id="user-1",
            job_code="RT-2025-000002",
            customer_name="Vikram",
            customer_whatsapp="9123456780",
            item_name="Laptop",
            problem="No power",
            status=JobStatus.COMPLETED,
        )
        mock_job_repository.list_for_user = AsyncMock(return_value=[done, sample_job])

        jobs = await controller.refresh()

        assert jobs == [done, sample_job]
        assert controller.filter_jobs() == [sample_job]
        assert controller.filter_jobs(JobFilter.COMPLETED) == [done]
        assert controller.filter_jobs(JobFilter.ALL) == [done, sample_job]


class TestSessionContext:
    """Test the session job cache."""

    def test_replace_job_missing(self, sample_job):
        session = SessionContext(user_id="user-1")

        assert session.replace_job(sample_job) is False
        assert session.jobs == []

    def test_prepend_and_find(self, sample_job):
        session = SessionContext(user_id="user-1")
        session.prepend_job(sample_job)

        assert session.find_job(sample_job.id) is sample_job
        assert session.find_job(uuid4()) is None
        assert session.has_profile is False
