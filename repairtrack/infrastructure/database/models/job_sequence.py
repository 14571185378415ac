"""
Job sequence SQLAlchemy model.
"""

from sqlalchemy import Column, DateTime, Integer, String

from .base import Base, utc_now


class JobSequenceModel(Base):
    """Last job number handed out per user and year."""

    __tablename__ = "job_sequences"

    user_id = Column(String(64), primary_key=True)
    year = Column(Integer, primary_key=True, autoincrement=False)
    last_value = Column(Integer, nullable=False, default=0)
    updated_at = Column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False
    )

    def __repr__(self) -> str:
        return f"<JobSequence(user_id={self.user_id}, year={self.year}, last_value={self.last_value})>"
