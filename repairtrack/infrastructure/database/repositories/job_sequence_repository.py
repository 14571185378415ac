"""Job sequence repository implementation."""

from sqlalchemy import extract, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from repairtrack.application.interfaces.repositories import JobSequenceRepositoryInterface
from repairtrack.config.logging import get_logger
from repairtrack.domain.exceptions.repository_error import RepositoryError
from repairtrack.infrastructure.database.models.base import utc_now
from repairtrack.infrastructure.database.models.job import JobModel
from repairtrack.infrastructure.database.models.job_sequence import JobSequenceModel
from repairtrack.infrastructure.database.upsert import dialect_insert

logger = get_logger(__name__)


class JobSequenceRepository(JobSequenceRepositoryInterface):
    """Hand out job numbers from a counter row per user and year.

    Each reservation is a single locking statement in the caller's
    transaction, so concurrent reservations for the same user are serialized
    by the database and a rolled back job insert gives its number back.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def reserve(self, user_id: str, year: int) -> int:
        try:
            value = await self._increment(user_id, year)
            if value is None:
                value = await self._create_or_increment(user_id, year)
        except SQLAlchemyError as e:
            logger.error("Job number reservation failed", user_id=user_id, year=year, error=str(e))
            raise RepositoryError(f"Failed to reserve a job number: {e}") from e

        logger.debug("Job number reserved", user_id=user_id, year=year, value=value)
        return value

    async def _increment(self, user_id: str, year: int):
        stmt = (
            update(JobSequenceModel)
            .where(JobSequenceModel.user_id == user_id, JobSequenceModel.year == year)
            .values(last_value=JobSequenceModel.last_value + 1, updated_at=utc_now())
            .returning(JobSequenceModel.last_value)
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def _create_or_increment(self, user_id: str, year: int) -> int:
        # First number of the year continues after jobs that predate the counter
        existing = await self.db.execute(
            select(func.count())
            .select_from(JobModel)
            .where(
                JobModel.user_id == user_id,
                extract("year", JobModel.created_at) == year,
            )
        )
        seed = existing.scalar_one()

        insert_stmt = dialect_insert(self.db, JobSequenceModel).values(
            user_id=user_id,
            year=year,
            last_value=seed + 1,
            updated_at=utc_now(),
        )
        stmt = insert_stmt.on_conflict_do_update(
            index_elements=[JobSequenceModel.user_id, JobSequenceModel.year],
            set_={
                "last_value": JobSequenceModel.last_value + 1,
                "updated_at": insert_stmt.excluded.updated_at,
            },
        ).returning(JobSequenceModel.last_value)

        result = await self.db.execute(stmt)
        return result.scalar_one()
