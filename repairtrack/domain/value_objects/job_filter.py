"""
Job list filter value object.
"""

from enum import Enum
from typing import TYPE_CHECKING, Iterable, List

from .job_status import JobStatus

if TYPE_CHECKING:
    from repairtrack.domain.entities.job import Job


class JobFilter(str, Enum):
    """Dashboard job list filters."""

    OPEN = "open"
    COMPLETED = "completed"
    AWAITING = "awaiting"
    ALL = "all"

    def matches(self, status: JobStatus) -> bool:
        """Check if a job in ``status`` belongs to this filter."""
        if self == self.COMPLETED:
            return status == JobStatus.COMPLETED
        if self == self.AWAITING:
            return status == JobStatus.AWAITING_PARTS
        if self == self.OPEN:
            return status != JobStatus.COMPLETED
        return True

    def apply(self, jobs: Iterable["Job"]) -> List["Job"]:
        """Filter jobs, keeping their order."""
        return [job for job in jobs if self.matches(job.status)]
