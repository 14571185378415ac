"""
Service interfaces for dependency inversion.
"""

from abc import ABC, abstractmethod

from repairtrack.domain.value_objects.job_code import JobCode


class JobCodeGeneratorInterface(ABC):
    """Interface for job code generation."""

    @abstractmethod
    async def next_code(self, user_id: str) -> JobCode:
        """Produce the code for the user's next job."""
        pass
