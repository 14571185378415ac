"""Job lifecycle use cases: creating jobs and moving them through statuses."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, List, Optional, Union
from uuid import UUID

from repairtrack.application.interfaces.repositories import JobRepositoryInterface
from repairtrack.application.interfaces.services import JobCodeGeneratorInterface
from repairtrack.application.services.message_templates import NotificationTemplates
from repairtrack.application.services.notification_dispatcher import (
    NotificationDispatcher,
)
from repairtrack.application.session import SessionContext
from repairtrack.config.logging import get_logger
from repairtrack.domain.entities.job import Job
from repairtrack.domain.exceptions.repository_error import (
    DuplicateJobError,
    JobNotFoundError,
)
from repairtrack.domain.exceptions.session_error import SubmissionInProgressError
from repairtrack.domain.exceptions.validation_error import (
    InvalidFormatError,
    InvalidStatusTransitionError,
    ProfileRequiredError,
    RequiredFieldError,
    ValidationError,
)
from repairtrack.domain.value_objects.job_filter import JobFilter
from repairtrack.domain.value_objects.job_status import JobStatus
from repairtrack.domain.value_objects.whatsapp_number import is_valid_indian_mobile
from repairtrack.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)
from repairtrack.infrastructure.monitoring.metrics import (
    record_job_created,
    record_status_update,
)

logger = get_logger(__name__)

REQUIRED_FIELDS = ("customer_name", "customer_whatsapp", "item_name", "problem")


@dataclass
class CreateJobRequest:
    """Request for creating a job."""

    customer_name: str
    customer_whatsapp: str
    item_name: str
    problem: str
    price: Any = 0
    notes: Optional[str] = None
    request_id: Optional[str] = None  # Idempotency key from the client


class JobLifecycleController:
    """Create jobs and change their status for one signed-in session.

    Every write goes to the repository first; the session's job cache is
    patched only after the commit, and the customer notification is started
    in the background and never awaited.
    """

    def __init__(
        self,
        session: SessionContext,
        job_repo: JobRepositoryInterface,
        code_generator: JobCodeGeneratorInterface,
        dispatcher: NotificationDispatcher,
        transaction: TransactionService,
        templates: NotificationTemplates,
        enforce_transitions: bool = False,
    ):
        self.session = session
        self.job_repo = job_repo
        self.code_generator = code_generator
        self.dispatcher = dispatcher
        self.transaction = transaction
        self.templates = templates
        self.enforce_transitions = enforce_transitions

    async def create_job(self, request: CreateJobRequest) -> Job:
        """Validate, persist and announce a new job."""
        if self.session.submitting:
            raise SubmissionInProgressError(self.session.user_id)

        self.session.submitting = True
        try:
            return await self._create_job(request)
        finally:
            self.session.submitting = False

    async def _create_job(self, request: CreateJobRequest) -> Job:
        user_id = self.session.user_id
        price = self._validate_create_request(request)

        existing = await self._find_submitted(request)
        if existing:
            return existing

        try:
            code = await self.code_generator.next_code(user_id)
            job = Job(
                user_id=user_id,
                job_code=str(code),
                customer_name=request.customer_name.strip(),
                customer_whatsapp=request.customer_whatsapp.strip(),
                item_name=request.item_name.strip(),
                problem=request.problem.strip(),
                price=price,
                notes=(request.notes or "").strip() or None,
                status=JobStatus.RECEIVED,
                request_id=request.request_id,
            )
            created_job = await self.job_repo.create(job)
            await self.transaction.commit()
        except DuplicateJobError as e:
            await self.transaction.rollback()
            # Another session committed the same request id first
            existing = await self._find_submitted(request)
            if existing is None:
                logger.error("Failed to create job", user_id=user_id, error=str(e))
                raise
            return existing
        except Exception as e:
            await self.transaction.rollback()
            logger.error("Failed to create job", user_id=user_id, error=str(e))
            raise

        self.session.prepend_job(created_job)
        record_job_created()

        logger.info(
            "Job created",
            user_id=user_id,
            job_id=str(created_job.id),
            job_code=created_job.job_code,
        )

        self.dispatcher.dispatch_detached(self.templates.job_received(created_job))
        return created_job

    async def update_job_status(
        self, job_id: UUID, new_status: Union[str, JobStatus]
    ) -> Job:
        """Persist a status change and notify the customer."""
        user_id = self.session.user_id
        status = self._parse_status(new_status)

        if self.enforce_transitions:
            await self._check_transition(job_id, status)

        try:
            updated_job = await self.job_repo.update_status(user_id, job_id, status)
            await self.transaction.commit()
        except Exception as e:
            await self.transaction.rollback()
            logger.error(
                "Failed to update job status",
                user_id=user_id,
                job_id=str(job_id),
                status=status.value,
                error=str(e),
            )
            raise

        self.session.replace_job(updated_job)
        record_status_update(status.value)

        logger.info(
            "Job status updated",
            user_id=user_id,
            job_id=str(job_id),
            job_code=updated_job.job_code,
            status=status.value,
        )

        self.dispatcher.dispatch_detached(self.templates.status_changed(updated_job))
        return updated_job

    async def refresh(self) -> List[Job]:
        """Reload the session's job cache from the repository."""
        jobs = await self.job_repo.list_for_user(self.session.user_id)
        self.session.reset_jobs(jobs)
        return self.session.jobs

    def filter_jobs(self, job_filter: JobFilter = JobFilter.OPEN) -> List[Job]:
        return job_filter.apply(self.session.jobs)

    async def _find_submitted(self, request: CreateJobRequest) -> Optional[Job]:
        """Return the job already stored under the request id, if any."""
        if not request.request_id:
            return None

        existing = await self.job_repo.get_by_request_id(
            self.session.user_id, request.request_id
        )
        if existing is None:
            return None

        if self.session.find_job(existing.id) is None:
            self.session.prepend_job(existing)
        logger.info(
            "Duplicate job submission ignored",
            user_id=self.session.user_id,
            request_id=request.request_id,
            job_code=existing.job_code,
        )
        return existing

    def _validate_create_request(self, request: CreateJobRequest) -> Decimal:
        if not self.session.has_profile:
            raise ProfileRequiredError(self.session.user_id)

        for field_name in REQUIRED_FIELDS:
            value = getattr(request, field_name)
            if not value or not str(value).strip():
                raise RequiredFieldError(field_name)

        if not is_valid_indian_mobile(request.customer_whatsapp):
            raise InvalidFormatError(
                "customer_whatsapp", "+91XXXXXXXXXX or a 10-digit mobile number"
            )

        return self._parse_price(request.price)

    @staticmethod
    def _parse_price(value: Any) -> Decimal:
        if value is None or value == "":
            return Decimal("0")
        try:
            price = Decimal(str(value))
        except InvalidOperation:
            raise InvalidFormatError("price", "a non-negative number")
        if not price.is_finite() or price < 0:
            raise InvalidFormatError("price", "a non-negative number")
        return price

    @staticmethod
    def _parse_status(value: Union[str, JobStatus]) -> JobStatus:
        try:
            return JobStatus(value)
        except ValueError:
            allowed = ", ".join(status.value for status in JobStatus)
            raise ValidationError(f"Invalid status '{value}'. Must be one of: {allowed}")

    async def _check_transition(self, job_id: UUID, status: JobStatus) -> None:
        current = self.session.find_job(job_id)
        if current is None:
            current = await self.job_repo.get_by_id(self.session.user_id, job_id)
        if current is None:
            raise JobNotFoundError(str(job_id))
        if not current.status.can_transition_to(status):
            raise InvalidStatusTransitionError(current.status.value, status.value)
