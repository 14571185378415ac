"""
Repository interfaces for dependency inversion.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from repairtrack.domain.entities.job import Job
from repairtrack.domain.entities.profile import Profile
from repairtrack.domain.value_objects.job_status import JobStatus


class JobRepositoryInterface(ABC):
    """Job repository interface."""

    @abstractmethod
    async def list_for_user(self, user_id: str) -> List[Job]:
        """List a user's jobs, newest first."""
        pass

    @abstractmethod
    async def count_for_user(self, user_id: str, year: Optional[int] = None) -> int:
        """Count a user's jobs, optionally only those created in ``year``."""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: str, job_id: UUID) -> Optional[Job]:
        """Get a job owned by the user."""
        pass

    @abstractmethod
    async def get_by_request_id(self, user_id: str, request_id: str) -> Optional[Job]:
        """Get the job created by an earlier submission with the same request id."""
        pass

    @abstractmethod
    async def create(self, job: Job) -> Job:
        """Create a new job."""
        pass

    @abstractmethod
    async def update_status(self, user_id: str, job_id: UUID, status: JobStatus) -> Job:
        """Set the status of a job owned by the user."""
        pass


class JobSequenceRepositoryInterface(ABC):
    """Per-user, per-year job number sequence."""

    @abstractmethod
    async def reserve(self, user_id: str, year: int) -> int:
        """Reserve and return the next sequence value for the user and year."""
        pass


class ProfileRepositoryInterface(ABC):
    """Profile repository interface."""

    @abstractmethod
    async def get_by_user_id(self, user_id: str) -> Optional[Profile]:
        """Get the user's profile, ``None`` until one is saved."""
        pass

    @abstractmethod
    async def upsert(self, profile: Profile) -> Profile:
        """Create or replace the user's profile."""
        pass
