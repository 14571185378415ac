"""Save shop profile use case."""

from dataclasses import dataclass

from repairtrack.application.interfaces.repositories import ProfileRepositoryInterface
from repairtrack.application.session import SessionContext
from repairtrack.config.logging import get_logger
from repairtrack.domain.entities.profile import Profile
from repairtrack.domain.exceptions.validation_error import (
    InvalidFormatError,
    RequiredFieldError,
)
from repairtrack.domain.value_objects.whatsapp_number import is_valid_indian_mobile
from repairtrack.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

logger = get_logger(__name__)


@dataclass
class SaveProfileRequest:
    """Request for saving a profile."""

    full_name: str
    phone: str
    shop_name: str


class SaveProfileUseCase:
    """Create or replace the signed-in user's profile."""

    def __init__(
        self,
        session: SessionContext,
        profile_repo: ProfileRepositoryInterface,
        transaction: TransactionService,
    ):
        self.session = session
        self.profile_repo = profile_repo
        self.transaction = transaction

    async def execute(self, request: SaveProfileRequest) -> Profile:
        full_name = (request.full_name or "").strip()
        phone = (request.phone or "").strip()
        shop_name = (request.shop_name or "").strip()

        for field_name, value in (
            ("full_name", full_name),
            ("phone", phone),
            ("shop_name", shop_name),
        ):
            if not value:
                raise RequiredFieldError(field_name)

        if not is_valid_indian_mobile(phone):
            raise InvalidFormatError("phone", "+91XXXXXXXXXX or a 10-digit mobile number")

        profile = Profile(
            user_id=self.session.user_id,
            full_name=full_name,
            phone=phone,
            shop_name=shop_name,
        )

        try:
            saved = await self.profile_repo.upsert(profile)
            await self.transaction.commit()
        except Exception as e:
            await self.transaction.rollback()
            logger.error("Failed to save profile", user_id=self.session.user_id, error=str(e))
            raise

        self.session.profile = saved
        logger.info("Profile saved", user_id=saved.user_id, shop_name=saved.shop_name)
        return saved
