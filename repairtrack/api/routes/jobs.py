"""Job endpoints: listing, creation, status changes and receipts."""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Header, Query, status

from repairtrack.api.dependencies import (
    AppSettingsDep,
    JobLifecycleControllerDep,
    JobRepositoryDep,
    SessionContextDep,
)
from repairtrack.api.schemas.common import ErrorResponse
from repairtrack.api.schemas.job import (
    JobCreateRequest,
    JobResponse,
    JobStatusUpdateRequest,
    ReceiptResponse,
)
from repairtrack.application.services.receipts import build_receipt
from repairtrack.application.use_cases.job_lifecycle import CreateJobRequest
from repairtrack.config.logging import get_logger
from repairtrack.domain.exceptions.repository_error import JobNotFoundError
from repairtrack.domain.value_objects.job_filter import JobFilter

logger = get_logger(__name__)
router = APIRouter(
    prefix="/jobs",
    tags=["jobs"],
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)


@router.get("", response_model=List[JobResponse])
async def list_jobs(
    controller: JobLifecycleControllerDep,
    job_filter: JobFilter = Query(JobFilter.OPEN, alias="filter"),
):
    """List the session's jobs, newest first."""
    return [JobResponse.from_entity(job) for job in controller.filter_jobs(job_filter)]


@router.post("/refresh", response_model=List[JobResponse])
async def refresh_jobs(controller: JobLifecycleControllerDep):
    """Reload the session's jobs from the database."""
    jobs = await controller.refresh()
    return [JobResponse.from_entity(job) for job in jobs]


@router.post("", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
async def create_job(
    job_data: JobCreateRequest,
    controller: JobLifecycleControllerDep,
    idempotency_key: Optional[str] = Header(None),
):
    """Create a job; the customer is told about it in the background."""
    job = await controller.create_job(
        CreateJobRequest(
            customer_name=job_data.customer_name,
            customer_whatsapp=job_data.customer_whatsapp,
            item_name=job_data.item_name,
            problem=job_data.problem,
            price=job_data.price,
            notes=job_data.notes,
            request_id=idempotency_key,
        )
    )
    return JobResponse.from_entity(job)


@router.patch("/{job_id}/status", response_model=JobResponse)
async def update_job_status(
    job_id: UUID,
    update: JobStatusUpdateRequest,
    controller: JobLifecycleControllerDep,
):
    """Change a job's status; the customer is told about it in the background."""
    job = await controller.update_job_status(job_id, update.status)
    return JobResponse.from_entity(job)


@router.get("/{job_id}/receipt", response_model=ReceiptResponse)
async def get_receipt(
    job_id: UUID,
    session: SessionContextDep,
    job_repository: JobRepositoryDep,
    app_settings: AppSettingsDep,
):
    """Printable receipt for one of the session's jobs."""
    job = session.find_job(job_id)
    if job is None:
        job = await job_repository.get_by_id(session.user_id, job_id)
    if job is None:
        raise JobNotFoundError(str(job_id))

    receipt = build_receipt(job, session.profile, app_settings.PUBLIC_BASE_URL)
    return ReceiptResponse.model_validate(receipt)
