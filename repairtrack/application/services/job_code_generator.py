"""
Job code generation.

Codes look like ``RT-2025-000004``: a shop prefix, the calendar year and a
per-user sequence number.
"""

from datetime import datetime, timezone
from typing import Callable

from repairtrack.application.interfaces.repositories import (
    JobRepositoryInterface,
    JobSequenceRepositoryInterface,
)
from repairtrack.application.interfaces.services import JobCodeGeneratorInterface
from repairtrack.config.logging import get_logger
from repairtrack.domain.value_objects.job_code import DEFAULT_PREFIX, JobCode

logger = get_logger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CountingJobCodeGenerator(JobCodeGeneratorInterface):
    """Derive the next code from the number of jobs the user already has.

    The count is read before the insert and nothing reserves it, so two
    concurrent submissions for the same user can receive the same code. The
    unique ``(user_id, job_code)`` constraint then rejects the second insert.
    """

    def __init__(
        self,
        job_repo: JobRepositoryInterface,
        prefix: str = DEFAULT_PREFIX,
        clock: Clock = utc_now,
    ):
        self.job_repo = job_repo
        self.prefix = prefix
        self.clock = clock

    async def next_code(self, user_id: str) -> JobCode:
        count = await self.job_repo.count_for_user(user_id)
        code = JobCode(year=self.clock().year, sequence=count + 1, prefix=self.prefix)
        logger.debug("Job code derived from job count", user_id=user_id, job_code=str(code))
        return code


class AtomicJobCodeGenerator(JobCodeGeneratorInterface):
    """Reserve the next code from a per-user, per-year counter.

    The reservation runs in the caller's database transaction, so it commits
    or rolls back together with the job insert.
    """

    def __init__(
        self,
        sequence_repo: JobSequenceRepositoryInterface,
        prefix: str = DEFAULT_PREFIX,
        clock: Clock = utc_now,
    ):
        self.sequence_repo = sequence_repo
        self.prefix = prefix
        self.clock = clock

    async def next_code(self, user_id: str) -> JobCode:
        year = self.clock().year
        sequence = await self.sequence_repo.reserve(user_id, year)
        code = JobCode(year=year, sequence=sequence, prefix=self.prefix)
        logger.debug("Job code reserved", user_id=user_id, job_code=str(code))
        return code
