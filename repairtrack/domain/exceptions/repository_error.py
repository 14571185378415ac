"""
Persistence-related domain exceptions.
"""


class RepositoryError(Exception):
    """Raised when the backing store rejects a read or write."""

    pass


class JobNotFoundError(RepositoryError):
    """Raised when a job does not exist for the owning user."""

    def __init__(self, job_id: str):
        self.job_id = job_id
        super().__init__(f"Job {job_id} not found")


class DuplicateJobError(RepositoryError):
    """Raised when a job clashes with an existing job code or request id."""

    pass
