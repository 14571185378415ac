"""Profile repository implementation."""

from typing import Optional
from uuid import uuid4

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from repairtrack.application.interfaces.repositories import ProfileRepositoryInterface
from repairtrack.config.logging import get_logger
from repairtrack.domain.entities.profile import Profile
from repairtrack.domain.exceptions.repository_error import RepositoryError
from repairtrack.infrastructure.database.models.base import utc_now
from repairtrack.infrastructure.database.models.profile import ProfileModel
from repairtrack.infrastructure.database.upsert import dialect_insert

logger = get_logger(__name__)


class ProfileRepository(ProfileRepositoryInterface):
    """Profile repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_user_id(self, user_id: str) -> Optional[Profile]:
        """Get the user's profile, ``None`` until one is saved."""
        stmt = (
            select(ProfileModel)
            .where(ProfileModel.user_id == user_id)
            .execution_options(populate_existing=True)
        )
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            logger.error("Failed to load profile", user_id=user_id, error=str(e))
            raise RepositoryError(f"Failed to load profile: {e}") from e

        model = result.scalar_one_or_none()
        return self._model_to_entity(model) if model else None

    async def upsert(self, profile: Profile) -> Profile:
        """Create or replace the user's profile, keyed by user id."""
        now = utc_now()
        insert_stmt = dialect_insert(self.db, ProfileModel).values(
            id=uuid4(),
            user_id=profile.user_id,
            full_name=profile.full_name,
            phone=profile.phone,
            shop_name=profile.shop_name,
            created_at=now,
            updated_at=now,
        )
        stmt = insert_stmt.on_conflict_do_update(
            index_elements=[ProfileModel.user_id],
            set_={
                "full_name": insert_stmt.excluded.full_name,
                "phone": insert_stmt.excluded.phone,
                "shop_name": insert_stmt.excluded.shop_name,
                "updated_at": insert_stmt.excluded.updated_at,
            },
        )

        try:
            await self.db.execute(stmt)
        except SQLAlchemyError as e:
            logger.error("Failed to save profile", user_id=profile.user_id, error=str(e))
            raise RepositoryError(f"Failed to save profile: {e}") from e

        saved = await self.get_by_user_id(profile.user_id)
        if saved is None:
            raise RepositoryError(f"Profile for {profile.user_id} was not saved")
        return saved

    def _model_to_entity(self, model: ProfileModel) -> Profile:
        """Convert SQLAlchemy model to domain entity."""
        return Profile(
            user_id=model.user_id,
            full_name=model.full_name,
            phone=model.phone,
            shop_name=model.shop_name,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
