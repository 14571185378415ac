"""
Profile SQLAlchemy model.
"""

from sqlalchemy import Column, String

from .base import BaseModel


class ProfileModel(BaseModel):
    """Shop profile database model."""

    __tablename__ = "profiles"

    user_id = Column(String(64), nullable=False, unique=True, index=True)
    full_name = Column(String(255), nullable=False)
    phone = Column(String(32), nullable=False)
    shop_name = Column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Profile(user_id={self.user_id}, shop_name={self.shop_name})>"
