"""Job domain entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from repairtrack.domain.value_objects.job_status import JobStatus


@dataclass
class Job:
    """Repair ticket owned by a single shop user."""

    user_id: str
    customer_name: str
    customer_whatsapp: str
    item_name: str
    problem: str
    price: Decimal = Decimal("0")
    notes: Optional[str] = None
    job_code: Optional[str] = None
    status: JobStatus = JobStatus.RECEIVED
    request_id: Optional[str] = None
    id: UUID = field(default_factory=uuid4)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate job data."""
        if not self.user_id:
            raise ValueError("Job owner is required")
        self.status = JobStatus(self.status)
        self.price = Decimal(str(self.price))
        if self.price < 0:
            raise ValueError("Job price cannot be negative")

        # Set timestamps if not provided
        if not self.created_at:
            self.created_at = datetime.now(timezone.utc)
        if not self.updated_at:
            self.updated_at = self.created_at

    @property
    def is_open(self) -> bool:
        return self.status.is_open()

    def change_status(self, status: JobStatus) -> None:
        """Move the job to ``status``."""
        self.status = JobStatus(status)
        self.updated_at = datetime.now(timezone.utc)
