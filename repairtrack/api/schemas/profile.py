"""
Profile API schemas.
"""

from pydantic import BaseModel, Field

from .common import TimestampMixin


class ProfileUpsertRequest(BaseModel):
    """Profile save request schema."""

    full_name: str = Field("", max_length=255)
    phone: str = Field("", max_length=32)
    shop_name: str = Field("", max_length=255)


class ProfileResponse(TimestampMixin):
    """Profile response schema."""

    user_id: str
    full_name: str
    phone: str
    shop_name: str

    model_config = {"from_attributes": True}
