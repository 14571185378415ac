"""
Transaction service for managing database transactions centrally.
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from repairtrack.config.logging import get_logger
from repairtrack.domain.exceptions.repository_error import RepositoryError

logger = get_logger(__name__)


class TransactionService:
    """Centralized transaction management service.

    Repositories only flush; use cases decide when a unit of work is done.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.logger = logger

    async def commit(self) -> None:
        """Explicitly commit the current transaction."""
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            self.logger.error("Transaction commit failed", error=str(e))
            raise RepositoryError(f"Failed to save changes: {e}") from e
        self.logger.debug("Transaction committed")

    async def rollback(self) -> None:
        """Explicitly rollback the current transaction."""
        await self.session.rollback()
        self.logger.debug("Transaction rolled back")
