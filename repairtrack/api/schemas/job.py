"""
Job-related API schemas.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional, Union
from uuid import UUID

from pydantic import BaseModel, Field

from repairtrack.domain.entities.job import Job
from repairtrack.domain.value_objects.job_status import JobStatus

from .common import TimestampMixin


class JobCreateRequest(BaseModel):
    """Job creation request schema.

    Required fields are checked by the lifecycle controller so that every
    client gets the same validation messages.
    """

    customer_name: str = Field("", max_length=255)
    customer_whatsapp: str = Field("", max_length=32)
    item_name: str = Field("", max_length=255)
    problem: str = Field("", max_length=2000)
    price: Optional[Union[Decimal, str]] = Field(None, description="Quoted price, >= 0")
    notes: Optional[str] = Field(None, max_length=2000, description="Optional notes")


class JobStatusUpdateRequest(BaseModel):
    """Job status update request schema."""

    status: str = Field(..., description="One of: Received, Awaiting Parts, In Progress, Completed")


class JobResponse(TimestampMixin):
    """Job response schema."""

    id: UUID
    job_code: str
    customer_name: str
    customer_whatsapp: str
    item_name: str
    problem: str
    price: Decimal
    notes: Optional[str] = None
    status: JobStatus

    model_config = {"from_attributes": True}

    @classmethod
    def from_entity(cls, job: Job) -> "JobResponse":
        return cls.model_validate(job)


class ReceiptResponse(BaseModel):
    """Printable receipt schema."""

    shop_name: str
    job_code: str
    customer_name: str
    customer_whatsapp: str
    item_name: str
    problem: str
    price: str
    status: str
    track_url: str
    issued_at: datetime

    model_config = {"from_attributes": True}
