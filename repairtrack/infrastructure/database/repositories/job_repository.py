"""Job repository implementation."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import extract, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from repairtrack.application.interfaces.repositories import JobRepositoryInterface
from repairtrack.config.logging import get_logger
from repairtrack.domain.entities.job import Job
from repairtrack.domain.exceptions.repository_error import (
    DuplicateJobError,
    JobNotFoundError,
    RepositoryError,
)
from repairtrack.domain.exceptions.validation_error import ValidationError
from repairtrack.domain.value_objects.job_status import JobStatus
from repairtrack.infrastructure.database.models.job import JobModel

logger = get_logger(__name__)


class JobRepository(JobRepositoryInterface):
    """Job repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_for_user(self, user_id: str) -> List[Job]:
        """List a user's jobs, newest first."""
        stmt = (
            select(JobModel)
            .where(JobModel.user_id == user_id)
            .order_by(JobModel.created_at.desc(), JobModel.job_code.desc())
        )
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            logger.error("Failed to list jobs", user_id=user_id, error=str(e))
            raise RepositoryError(f"Failed to load jobs: {e}") from e

        return [self._model_to_entity(model) for model in result.scalars().all()]

    async def count_for_user(self, user_id: str, year: Optional[int] = None) -> int:
        """Count a user's jobs, optionally only those created in ``year``."""
        stmt = select(func.count()).select_from(JobModel).where(JobModel.user_id == user_id)
        if year is not None:
            stmt = stmt.where(extract("year", JobModel.created_at) == year)
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to count jobs: {e}") from e

        return result.scalar_one()

    async def get_by_id(self, user_id: str, job_id: UUID) -> Optional[Job]:
        """Get a job owned by the user."""
        model = await self._get_model(user_id, job_id)
        return self._model_to_entity(model) if model else None

    async def get_by_request_id(self, user_id: str, request_id: str) -> Optional[Job]:
        stmt = select(JobModel).where(
            JobModel.user_id == user_id, JobModel.request_id == request_id
        )
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to load job: {e}") from e

        model = result.scalar_one_or_none()
        return self._model_to_entity(model) if model else None

    async def create(self, job: Job) -> Job:
        """Create a new job."""
        job_model = JobModel(
            id=job.id,
            user_id=job.user_id,
            job_code=job.job_code,
            customer_name=job.customer_name,
            customer_whatsapp=job.customer_whatsapp,
            item_name=job.item_name,
            problem=job.problem,
            price=job.price,
            notes=job.notes,
            status=job.status.value,
            request_id=job.request_id,
            created_at=job.created_at,
            updated_at=job.updated_at,
        )

        self.db.add(job_model)
        try:
            # Use flush instead of commit to maintain transaction atomicity
            await self.db.flush()
            await self.db.refresh(job_model)
        except IntegrityError as e:
            logger.warning(
                "Job insert rejected", user_id=job.user_id, job_code=job.job_code, error=str(e)
            )
            raise DuplicateJobError(f"Job {job.job_code} could not be saved: {e.orig}") from e
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to create job: {e}") from e

        return self._model_to_entity(job_model)

    async def update_status(self, user_id: str, job_id: UUID, status: JobStatus) -> Job:
        """Set the status of a job owned by the user."""
        try:
            status = JobStatus(status)
        except ValueError:
            raise ValidationError(f"Invalid status '{status}'")

        job_model = await self._get_model(user_id, job_id)
        if not job_model:
            raise JobNotFoundError(str(job_id))

        job = self._model_to_entity(job_model)
        job.change_status(status)
        job_model.status = job.status.value
        job_model.updated_at = job.updated_at

        try:
            await self.db.flush()
            await self.db.refresh(job_model)
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to update job {job_id}: {e}") from e

        return self._model_to_entity(job_model)

    async def _get_model(self, user_id: str, job_id: UUID) -> Optional[JobModel]:
        stmt = select(JobModel).where(JobModel.id == job_id, JobModel.user_id == user_id)
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to load job {job_id}: {e}") from e
        return result.scalar_one_or_none()

    def _model_to_entity(self, model: JobModel) -> Job:
        """Convert SQLAlchemy model to domain entity."""
        return Job(
            id=model.id,
            user_id=model.user_id,
            job_code=model.job_code,
            customer_name=model.customer_name,
            customer_whatsapp=model.customer_whatsapp,
            item_name=model.item_name,
            problem=model.problem,
            price=model.price if model.price is not None else 0,
            notes=model.notes,
            status=JobStatus(model.status),
            request_id=model.request_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
