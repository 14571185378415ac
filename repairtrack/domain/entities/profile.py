"""Shop profile domain entity."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

DEFAULT_SHOP_NAME = "RepairTrack"


@dataclass
class Profile:
    """Shop owner profile, one per user."""

    user_id: str
    full_name: str
    phone: str
    shop_name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        if not self.user_id:
            raise ValueError("Profile owner is required")
        if not self.created_at:
            self.created_at = datetime.now(timezone.utc)
        if not self.updated_at:
            self.updated_at = self.created_at

    @property
    def display_shop_name(self) -> str:
        return self.shop_name or DEFAULT_SHOP_NAME
